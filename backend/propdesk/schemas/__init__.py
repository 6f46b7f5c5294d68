"""Pydantic schemas for the PropDesk screens."""

from propdesk.schemas.base import *
from propdesk.schemas.user import *
from propdesk.schemas.property import *
from propdesk.schemas.tenant import *
from propdesk.schemas.vendor import *
from propdesk.schemas.lease import *
from propdesk.schemas.maintenance import *
from propdesk.schemas.navigation import *
