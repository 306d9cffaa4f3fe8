"""Plugin models."""

from sqlmodel import Field, SQLModel


class PluginBase(SQLModel):
    description: str
    wasm_url: str


class Plugin(PluginBase, table=True):
    """A stored plugin record. ``id`` is assigned by the database on insert."""

    __tablename__ = "plugins"  # pyright: ignore[reportAssignmentType]
    # Ids of deleted rows are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    id: int | None = Field(default=None, primary_key=True)


class PluginCreate(PluginBase):
    """Fields accepted when creating a plugin (no id)."""

    pass
