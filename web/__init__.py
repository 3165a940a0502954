"""
Web API for the underwriting lifecycle service.
"""
