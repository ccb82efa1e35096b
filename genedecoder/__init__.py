# -*- coding: utf-8 -*-

"""Top-level package for genedecoder."""

__author__ = """genedecoder developers"""
__version__ = '0.1.0'
