"""
Reorder Script Service

Handles:
    - Renumber one (distributor, trigger point) group as 1..n
    - All-or-nothing: a bad id list or a DB failure leaves the group untouched
"""

# Python Packages
import logging
from typing import List

# Database
from ...config.database import db

# Models
from ...models.feather_logic_script import LogicScript

# SQLAlchemy
from sqlalchemy.exc import SQLAlchemyError

# Services
from .script_cache import get_script_cache

# Exceptions
from ...util.exceptions import ValidationException

# App Messages
from ...util import messages


logger = logging.getLogger(__name__)





class ReorderScriptService:

    def reorder_scripts(
        self,
        distributor_id: str,
        trigger_point: str,
        ordered_ids: List[int]
    ) -> dict:
        """
        Assign sequence_order = index + 1 following ordered_ids

        Args:
            distributor_id (str)
            trigger_point (str)
            ordered_ids (list[int]): every id of the group, exactly once

        Returns:
            dict
        """

        group = LogicScript.query.filter_by(
            distributor_id = distributor_id,
            trigger_point = trigger_point
        ).all()

        by_id = {script.id: script for script in group}

        if len(ordered_ids) != len(set(ordered_ids)) or set(ordered_ids) != set(by_id):
            raise ValidationException(
                message = messages.ERROR['REORDER_MEMBERSHIP_MISMATCH'],
                details = f"expected ids {sorted(by_id)}, got {list(ordered_ids)}"
            )

        try:
            # Park the group on negative values first so the unique
            # (distributor, trigger, order) constraint holds between updates
            for index, script_id in enumerate(ordered_ids, 1):
                by_id[script_id].sequence_order = -index
            db.session.flush()

            for index, script_id in enumerate(ordered_ids, 1):
                by_id[script_id].sequence_order = index

            db.session.commit()

        except SQLAlchemyError:
            db.session.rollback()
            raise

        get_script_cache().invalidate(distributor_id)

        logger.info(
            "🔀 Reordered %d scripts (%s, %s)", len(ordered_ids), distributor_id, trigger_point
        )
        return {
            "trigger_point": trigger_point,
            "scripts": [
                {"id": script_id, "sequence_order": index}
                for index, script_id in enumerate(ordered_ids, 1)
            ],
            "message": messages.SUCCESS['SCRIPT_REORDER_SUCCESS']
        }


    def resolve_trigger_point(self, distributor_id: str, script_ids: List[int]) -> str:
        """
        Trigger point shared by the given scripts, for payloads that omit it
        """

        rows = LogicScript.query.with_entities(LogicScript.trigger_point).filter(
            LogicScript.distributor_id == distributor_id,
            LogicScript.id.in_(script_ids)
        ).distinct().all()

        trigger_points = {row[0] for row in rows}

        if not trigger_points:
            raise ValidationException(
                message = messages.ERROR['REORDER_MEMBERSHIP_MISMATCH']
            )

        if len(trigger_points) > 1:
            raise ValidationException(
                message = messages.ERROR['REORDER_MIXED_TRIGGERS']
            )

        return trigger_points.pop()
