"""
Resume Structuring Engine
"""
