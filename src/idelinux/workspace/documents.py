"""Default contents of the managed ``.vscode`` documents.

Defaults are built as plain dicts and rendered by ``render_document``,
the same function the patcher uses for rewrites, so a freshly created
file and a patched file share one formatting convention: 4-space
indentation, insertion-ordered keys, and a trailing newline.
"""

from __future__ import annotations

import json
from typing import Any

from idelinux.discovery.families import UNITY_EXTENSION_ID

VSCODE_DIR = ".vscode"
LAUNCH_FILE = "launch.json"
SETTINGS_FILE = "settings.json"
EXTENSIONS_FILE = "extensions.json"

# Debug configuration ``type`` contributed by the Unity extension.
DEBUGGER_TYPE = "vstuc"
SOLUTION_SETTING = "dotnet.defaultSolution"
# Only settings files carrying this section are patched.
MANAGED_SETTINGS_MARKER = "files.exclude"

INDENT = 4

_EXCLUDED_PATTERNS = (
    "**/.DS_Store",
    "**/.git",
    "**/.vs",
    "**/.gitmodules",
    "**/.vsconfig",
    "**/*.booproj",
    "**/*.pidb",
    "**/*.suo",
    "**/*.user",
    "**/*.userprefs",
    "**/*.unityproj",
    "**/*.dll",
    "**/*.exe",
    "**/*.pdf",
    "**/*.mid",
    "**/*.midi",
    "**/*.wav",
    "**/*.gif",
    "**/*.ico",
    "**/*.jpg",
    "**/*.jpeg",
    "**/*.png",
    "**/*.psd",
    "**/*.tga",
    "**/*.tif",
    "**/*.tiff",
    "**/*.3ds",
    "**/*.3DS",
    "**/*.fbx",
    "**/*.FBX",
    "**/*.lxo",
    "**/*.LXO",
    "**/*.ma",
    "**/*.MA",
    "**/*.obj",
    "**/*.OBJ",
    "**/*.asset",
    "**/*.cubemap",
    "**/*.flare",
    "**/*.mat",
    "**/*.meta",
    "**/*.prefab",
    "**/*.unity",
    "build/",
    "Build/",
    "Library/",
    "library/",
    "obj/",
    "Obj/",
    "Logs/",
    "logs/",
    "ProjectSettings/",
    "UserSettings/",
    "temp/",
    "Temp/",
)

_YAML_ASSETS = ("*.asset", "*.meta", "*.prefab", "*.unity")


def attach_configuration() -> dict[str, Any]:
    """The debugger attach entry required in ``launch.json``."""
    return {
        "name": "Attach to Unity",
        "type": DEBUGGER_TYPE,
        "request": "attach",
    }


def default_launch() -> dict[str, Any]:
    return {
        "version": "0.2.0",
        "configurations": [attach_configuration()],
    }


def default_settings(solution_file_name: str) -> dict[str, Any]:
    """Default ``settings.json`` pointing the C# tooling at *solution_file_name*."""
    return {
        MANAGED_SETTINGS_MARKER: {pattern: True for pattern in _EXCLUDED_PATTERNS},
        "files.associations": {pattern: "yaml" for pattern in _YAML_ASSETS},
        "explorer.fileNesting.enabled": True,
        "explorer.fileNesting.patterns": {"*.sln": "*.csproj"},
        SOLUTION_SETTING: solution_file_name,
    }


def default_extensions() -> dict[str, Any]:
    return {"recommendations": [UNITY_EXTENSION_ID]}


def render_document(data: Any) -> str:
    """Serialize a document the way every managed file is written."""
    return json.dumps(data, indent=INDENT, ensure_ascii=False) + "\n"
