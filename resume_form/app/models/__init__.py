from .contact import CONTACT_FIELDS, ContactRecord  # noqa
