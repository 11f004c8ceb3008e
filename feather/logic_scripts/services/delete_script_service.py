"""
Delete Script Service

Handles:
    - Hard delete of one logic script
    - Siblings keep their sequence_order (gaps are allowed)
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Models
from ...models.feather_logic_script import LogicScript

# SQLAlchemy
from sqlalchemy.exc import SQLAlchemyError

# Services
from .script_cache import get_script_cache

# Exceptions
from ...util.exceptions import NotFoundException

# App Messages
from ...util import messages


logger = logging.getLogger(__name__)





class DeleteScriptService:

    def delete_script(self, distributor_id: str, script_id: int) -> dict:
        """
        Delete a script owned by the distributor

        Args:
            distributor_id (str)
            script_id (int)

        Returns:
            dict
        """

        try:
            script = LogicScript.query.filter_by(
                id = script_id,
                distributor_id = distributor_id
            ).first()

            if not script:
                raise NotFoundException(message = messages.ERROR['SCRIPT_NOT_FOUND'])

            db.session.delete(script)
            db.session.commit()

        except SQLAlchemyError:
            db.session.rollback()
            raise

        get_script_cache().invalidate(distributor_id)

        logger.info("🗑️  Logic script %s deleted (%s)", script_id, distributor_id)
        return {
            "id": script_id,
            "message": messages.SUCCESS['SCRIPT_DELETE_SUCCESS']
        }
