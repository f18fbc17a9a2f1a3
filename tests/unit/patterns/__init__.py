"""Design pattern example tests.

Each module checks the printed lines and object relationships of one
pattern's example code.
"""
