"""
Services Package

Components shared by the routers and repositories:
- logger.py: LoggerService handle (debug/info/warn/error) and logging setup
- mapper.py: Explicit entity <-> DTO conversions
- security.py: Password hashing and JWT utilities for the identity endpoints
"""
