"""Developer command line for idelinux.

A thin consumer of the public API for inspecting discovery and
exercising the patcher and launcher by hand. The library never imports
this package.
"""
