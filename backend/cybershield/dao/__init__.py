"""
Data Access Object (DAO) package.

WHY: DAOs keep storage details out of the business logic. The only store
is the JSON file holding contact submissions.
"""

from cybershield.dao.contact_store import ContactStore

__all__ = ["ContactStore"]
