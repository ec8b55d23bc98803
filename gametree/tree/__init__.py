"""
Tree Module

Game tree representation shared by every search algorithm.

Key Components:
    - GameTreeNode: Lazily expanded node with a cached evaluation
    - ROOT_DECISION: Placeholder decision carried by root nodes
"""

from gametree.tree.node import GameTreeNode, ROOT_DECISION

__all__ = ['GameTreeNode', 'ROOT_DECISION']
