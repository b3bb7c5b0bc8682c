"""Divide-and-conquer subpackage; it holds no modules."""