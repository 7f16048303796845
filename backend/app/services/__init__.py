# Services package init
"""
DreamHome API — Services Layer
================================

What:  The layer between routes (HTTP) and the database.
How:   RecordService runs exactly one parameterized statement per operation
       and translates driver errors into DatabaseError / NotFoundError.

Service Inventory:
    - branch_service, staff_service, property_service, client_service:
      RecordService instances, one per table
"""
