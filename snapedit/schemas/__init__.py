# Schemas package init
"""
SnapEdit Backend: Pydantic Schemas
=====================================

Input models for each action, output models for each record type, and the
shared success envelope. Wire format is camelCase; Python attributes are
snake_case.
"""
