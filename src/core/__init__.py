"""
Core arithmetic engine, domain models, contracts, and logging.

This module contains the foundational building blocks that are independent
of any driver or I/O (the BigValue engine and its request/result contracts).
"""
