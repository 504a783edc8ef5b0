"""
Item records feature: AirTable field mapping, soft delete, HTTP endpoints.
"""
