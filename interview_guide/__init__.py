"""
Interview Guide - LLM-driven mock technical interviews

Generates resume-seeded interview questions, collects answers and scores
the finished interview into a structured report.
"""

__version__ = "0.1.0"
__author__ = "Interview Guide Team"
