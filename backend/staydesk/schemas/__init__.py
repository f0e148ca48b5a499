"""Pydantic schemas for the StayDesk API."""

from staydesk.schemas.auth import *
from staydesk.schemas.property import *
from staydesk.schemas.booking import *
from staydesk.schemas.message import *
from staydesk.schemas.housekeeping import *
from staydesk.schemas.payment import *
from staydesk.schemas.integration import *
from staydesk.schemas.analytics import *
from staydesk.schemas.dashboard import *
