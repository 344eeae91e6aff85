"""Binary trees with parent links: traversals, measures, rotations, search trees, AVL trees and max heaps."""

__version__ = "0.1.0"