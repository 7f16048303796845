# Routes package init
"""
DreamHome API — Routes Package
================================

Route Inventory:
    - branches.py:    GET/POST   /branches
    - staff.py:       GET/POST   /staff,       DELETE /staff/{id}
    - properties.py:  GET/POST   /properties,  GET/DELETE /properties/{propertyNo}
    - clients.py:     GET/POST   /clients
    - health.py:      GET        /  and  /health

Routes are THIN: they extract path parameters and bodies, call the matching
RecordService and return its result. SQL lives in app.services.
"""
