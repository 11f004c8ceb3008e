"""
Model: LogicScript
Table: feather_logic_scripts

A distributor-authored business rule evaluated at one storefront trigger
point. Scripts of one (distributor_id, trigger_point) group run in
ascending sequence_order; inactive scripts are kept but skipped.
"""

# Python Packages
from sqlalchemy import func

# Database
from ..config.database import db





class LogicScript(db.Model):
    """ A business rule owned by one distributor... """

    # Table Name
    __tablename__ = "feather_logic_scripts"

    __table_args__ = (
        db.UniqueConstraint(
            "distributor_id", "trigger_point", "sequence_order",
            name = "uq_logic_script_group_order"
        ),
    )

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    distributor_id = db.Column(
        db.String(64),
        nullable = False,
        index = True,
        doc = "Owning tenant. Every query filters on it."
    )

    trigger_point = db.Column(
        db.String(32),
        nullable = False,
        doc = "storefront_load | quantity_change | add_to_cart | submit"
    )

    description = db.Column(
        db.Text,
        nullable = False,
        default = "",
        doc = "Human-readable summary. Not used in evaluation."
    )

    script_content = db.Column(db.Text, nullable = False)

    sequence_order = db.Column(
        db.Integer,
        nullable = False,
        doc = "Evaluation order inside the trigger point group, ascending."
    )

    active = db.Column(
        db.Boolean,
        nullable = False,
        default = True
    )

    created_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        server_default = func.now()
    )

    updated_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        server_default = func.now(),
        onupdate = func.now()
    )



    def to_dict(self) -> dict:
        """ API representation... """

        return {
            "id": self.id,
            "distributor_id": self.distributor_id,
            "trigger_point": self.trigger_point,
            "description": self.description,
            "script_content": self.script_content,
            "sequence_order": self.sequence_order,
            "active": self.active,
            "created_at": self._format_datetime(self.created_at),
            "updated_at": self._format_datetime(self.updated_at)
        }


    @staticmethod
    def _format_datetime(value):
        return value.strftime("%Y-%m-%d %H:%M:%S") if value else None


    def __repr__(self):
        return f"<LogicScript {self.id} {self.trigger_point}#{self.sequence_order}>"
