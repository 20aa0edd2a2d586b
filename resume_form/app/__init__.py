"""This module serves as the entry point for the resume form application.

The application collects a person's contact and resume details through a
single-page form, validates them, previews them, and exports them to a
paginated PDF.

Notes:
    1. This module does not contain any functions or classes of its own.
    2. The actual application logic is defined in other modules, such as:
       - app.core.config: Contains application settings and configuration.
       - app.core.form_flow: Holds the editing/previewing state container.
       - app.api.routes.route_logic: Validation, phone formatting, pagination
         and PDF export.
       - app.web.pages: The HTML form and preview pages.
    3. No disk, network, or database access occurs in this module directly.

"""
