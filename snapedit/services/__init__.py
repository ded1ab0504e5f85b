# Services package init
"""
SnapEdit Backend: Services Layer
===================================

What:  The action layer: one method per named action, between routes (HTTP)
       and the database.
How:   Every method takes (db, caller, input) explicitly, runs the
       authorization guard, resolves ownership of any referenced row, then
       issues a single read or write and returns the success envelope.

Service Inventory:
    - ownership.py:           get_owned_project / get_owned_screenshot
    - project_service.py:     createProject, updateProject, listProjects
    - screenshot_service.py:  createScreenshot, updateScreenshot, listScreenshots
    - edit_service.py:        createScreenshotEdit, listScreenshotEdits
"""
