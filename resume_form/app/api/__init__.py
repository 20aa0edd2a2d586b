"""
This package holds the API routes of the resume form application.

Notes:
    1. Routes are defined in `routes` and mounted by `app.main.create_app`.
    2. The business logic the routes call lives in `routes.route_logic` and
       performs no network or database access.

"""
