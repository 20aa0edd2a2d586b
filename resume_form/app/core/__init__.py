"""This module serves as the initialization file for the core package of the resume form application.

Notes:
    1. This file is intentionally empty as it is used to initialize the package.
    2. Configuration and the form state container live in submodules.

"""
