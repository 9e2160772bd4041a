"""
Postboard Server - Routes Package

This package contains the APIRouter modules included by server.py.
"""
