"""
QuickEx backend package.

This package provides a small FastAPI service with a health check, a
username intake stub and a Supabase client handle held for future use.
"""
