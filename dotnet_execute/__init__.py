"""
dotnet-execute - launch planning for compiled .NET applications.

This package decides which runtime components a .NET app image needs
(detect phase) and which processes the finished image exposes (build phase).
"""

__version__ = "0.1.0"
