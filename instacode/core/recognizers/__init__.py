"""Instruction recognizers, one module per instruction family.

Every recognizer is a plain function ``(session, instruction) -> bool`` that
returns True when the line has the shape it handles.
"""
