"""
Core: матричная модель, численные примитивы и алгоритмы.

Модуль не зависит от драйвера (src.demo) и не выполняет I/O.
"""
