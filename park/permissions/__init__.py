"""
.. autoclasstree:: park.permissions

This module contains the various permission types. A permission is essentially
just an object that can be called asynchronously and raises a
RoutePermissionError in the case of a failed permission.
"""

from park.permissions.decorators import requires
from park.permissions.managers import UserIsManager
from park.permissions.permission import Permission, RoutePermissionError
