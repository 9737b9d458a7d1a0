"""
zipline-auth: account management and cookie-based session authentication.
"""
