"""
Service layer abstraction.

Each service encapsulates the logic for one part of the API.  Services
receive their collaborators (the coaster store, the admin password)
through their constructors and are attached to the application state
by ``create_app``; handlers look them up through FastAPI dependencies.
"""
