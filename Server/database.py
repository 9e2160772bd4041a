"""
Postboard Server - Database Module

This module exports the global db_manager instance for use across the application.
"""

from managers.database_manager import DatabaseManager

# Global database manager instance
# Set by the lifespan handler inside server.CreateApp(), disposed on shutdown
db_manager: DatabaseManager = None
