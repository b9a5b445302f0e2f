"""
.. autoclasstree:: park.service

The service layer for the system. Acts as the internal API.
Each interface (the REST API, the command line) should use the
service layer to implement its logic.

The service layer implements the use cases for the park, such
that they may be reused by any program that needs them.
It is designed to represent the business logic.
"""
