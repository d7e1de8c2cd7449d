"""Argument prefixes recognised on the command line."""

from __future__ import annotations

from enum import StrEnum


class Prefix(StrEnum):
    """Prefix that introduces an argument value (``n/Amy``)."""

    NAME = "n/"
    PHONE = "p/"
    EMAIL = "e/"
    JOB_POSITION = "j/"
    TAG = "t/"
    BIRTHDAY = "bd/"
    WORK_ANNIVERSARY = "wa/"
    EMPLOYEE_ID = "eid/"
    ANNIVERSARY_NAME = "an/"
    ANNIVERSARY_DATE = "d/"
    ANNIVERSARY_TYPE = "at/"
    ANNIVERSARY_DESC = "ad/"
    ANNIVERSARY_TYPE_DESC = "atdesc/"
    ANNIVERSARY_INDEX = "ai/"
