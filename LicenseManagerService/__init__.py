"""
License Manager Service Django project.
"""
