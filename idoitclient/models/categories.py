"""Category models shipped with the client."""

from __future__ import annotations

from idoitclient.models.base import IdoitCategory
from idoitclient.models.params import DialogTitle, DialogValue, IdoitDate, ObjectRef, OptionalText


class CategoryGeneral(IdoitCategory):
    """Global category present on every object."""
    CATEGORY = "C__CATG__GLOBAL"

    title: OptionalText = None
    sysid: OptionalText = None
    status: DialogTitle = None
    cmdb_status: DialogValue = None
    purpose: DialogValue = None
    category: DialogValue = None
    tag: list[DialogTitle] | None = None
    created: OptionalText = None
    changed: OptionalText = None
    description: OptionalText = None


class CategoryContactAssignment(IdoitCategory):
    CATEGORY = "C__CATG__CONTACT"

    contact: ObjectRef = None
    role: DialogTitle = None
    primary: DialogTitle = None


class CategoryAccounting(IdoitCategory):
    CATEGORY = "C__CATG__ACCOUNTING"

    inventory_no: OptionalText = None
    account: DialogValue = None
    acquirementdate: IdoitDate = None
    order_no: OptionalText = None
    invoice_no: OptionalText = None
    guarantee_period: int | None = None


class CategoryModel(IdoitCategory):
    CATEGORY = "C__CATG__MODEL"

    manufacturer: DialogValue = None
    title: DialogValue = None
    serial: OptionalText = None
    productid: OptionalText = None
    firmware: OptionalText = None


class CategoryPersonMasterData(IdoitCategory):
    """Persons → Master Data."""
    CATEGORY = "C__CATS__PERSON_MASTER"

    first_name: OptionalText = None
    last_name: OptionalText = None
    mail: OptionalText = None
    phone_company: OptionalText = None
    department: OptionalText = None
