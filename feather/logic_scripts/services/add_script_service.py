"""
Add Script Service

Handles:
    - Create Logic Script
    - Assign next sequence_order inside the trigger point group
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Models
from ...models.feather_logic_script import LogicScript

# SQLAlchemy
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

# Services
from .script_cache import get_script_cache

# Exceptions
from ...util.exceptions import ServiceException

# App Messages
from ...util import messages


logger = logging.getLogger(__name__)





class AddScriptService:

    def create_script(self, distributor_id: str, args: dict) -> dict:
        """
        Create a logic script at the end of its trigger point group

        Args:
            distributor_id (str)
            args (dict):
                {
                    "trigger_point": str,
                    "description": str,
                    "script_content": str,
                    "active": bool (optional, default True)
                }

        Returns:
            dict
        """

        trigger_point = args.get("trigger_point")

        try:
            max_order = (
                db.session.query(func.max(LogicScript.sequence_order))
                .filter(
                    LogicScript.distributor_id == distributor_id,
                    LogicScript.trigger_point == trigger_point
                )
                .scalar()
            )

            script = LogicScript(
                distributor_id = distributor_id,
                trigger_point = trigger_point,
                description = args.get("description") or "",
                script_content = args.get("script_content"),
                sequence_order = (max_order or 0) + 1,
                active = args.get("active", True)
            )
            db.session.add(script)
            db.session.commit()

        except IntegrityError as errors:
            # Concurrent create took the same sequence_order
            db.session.rollback()

            raise ServiceException(
                error_code = "SCRIPT_CREATE_FAILED",
                message = messages.ERROR['SCRIPT_CREATE_FAILED'],
                details = str(errors.orig)
            )

        except SQLAlchemyError:
            db.session.rollback()
            raise

        get_script_cache().invalidate(distributor_id)

        logger.info(
            "✅ Logic script %s created (%s, %s #%s)",
            script.id, distributor_id, trigger_point, script.sequence_order
        )
        return script.to_dict()
