"""Classic algorithms: arrays, binary search, bit tricks, trees and dynamic programming."""

__version__ = "0.1.0"