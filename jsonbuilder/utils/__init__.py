"""
jsonbuilder configuration.
"""
