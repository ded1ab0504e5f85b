# Routes package init
"""
SnapEdit Backend: API Routes Package
=======================================

What:  Named remote procedures, one POST route per action.

Route Inventory:
    - projects.py:          POST /_actions/createProject
                            POST /_actions/updateProject
                            POST /_actions/listProjects
    - screenshots.py:       POST /_actions/createScreenshot
                            POST /_actions/updateScreenshot
                            POST /_actions/listScreenshots
    - screenshot_edits.py:  POST /_actions/createScreenshotEdit
                            POST /_actions/listScreenshotEdits
    - health.py:            GET  /health

Design Principle:
    Routes are THIN: FastAPI validates the input model, the route collects
    the caller identity and session via Depends(), and the service does the
    rest. Errors are raised, never returned; main.py renders them.
"""
