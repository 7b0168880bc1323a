"""cppforge -- scaffolding for CMake-based C++ applications and libraries."""

__version__ = "0.1.0"
