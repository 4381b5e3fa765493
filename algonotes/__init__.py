"""Classic data structures and algorithms in plain Python: searching, sorting, heaps, trees and more."""

__version__ = "0.1.0"