"""
Edit Script Service

Handles:
    - Toggle active
    - Update script_content / description
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

EDITABLE_FIELDS = ("active", "script_content", "description")





class EditScriptService:

    def edit_script(self, distributor_id: str, script_id: int, patch: dict) -> dict:
        """
        Apply a partial update

        Args:
            distributor_id (str)
            script_id (int)
            patch (dict): any of active, script_content, description

        Returns:
            dict
        """

        script = LogicScript.query.filter_by(
            id = script_id,
            distributor_id = distributor_id
        ).first()

        if not script:
            raise NotFoundException(message = messages.ERROR['SCRIPT_NOT_FOUND'])

        try:
            for field in EDITABLE_FIELDS:
                if field in patch:
                    setattr(script, field, patch[field])

            db.session.commit()

        except SQLAlchemyError:
            db.session.rollback()
            raise

        get_script_cache().invalidate(distributor_id)

        logger.info("✏️  Logic script %s updated (%s)", script_id, ", ".join(sorted(patch)))
        return {
            "script": script.to_dict(),
            "message": messages.SUCCESS['SCRIPT_UPDATE_SUCCESS']
        }
