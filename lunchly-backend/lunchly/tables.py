from .extensions import db

customers = db.Table(
    "customers",
    db.Column("id", db.Integer, primary_key=True),
    db.Column("first_name", db.Text, nullable=False),
    db.Column("last_name", db.Text, nullable=False),
    db.Column("phone", db.Text),
    db.Column("notes", db.Text),
)

reservations = db.Table(
    "reservations",
    db.Column("id", db.Integer, primary_key=True),
    db.Column("customer_id", db.Integer, db.ForeignKey("customers.id"), nullable=False, index=True),
    db.Column("num_guests", db.Integer, nullable=False),
    db.Column("start_at", db.DateTime, nullable=False),
    db.Column("notes", db.Text, nullable=False, server_default=""),
)
