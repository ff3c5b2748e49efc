"""A module that centralizes the version information for valueset.

Changing the version here automatically updates the version used in the build system and rendered in the
documentation.
"""

__version__ = "0.1.0"
VERSION_STRING = __version__

__version_tuple__ = tuple(int(x) if x.isdigit() else x for x in __version__.split('.'))


if __name__ == '__main__':
    print(VERSION_STRING)
