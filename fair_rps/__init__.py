"""
公平石头剪刀布
Provably Fair Rock Paper Scissors
"""
__version__ = "1.0.0"
