"""Persistence helpers for portal preferences."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from sqlalchemy.orm import Session

from notice.infrastructure.models import PortalPreferenceModel


class PortalPreferenceRepository:
    """Read and write the string-array preferences of a portal instance."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_values(self, *, username: str, instance_id: str, name: str) -> list[str] | None:
        model = self._get_model(username=username, instance_id=instance_id, name=name)
        if model is None:
            return None
        return list(model.preference_values or [])

    def save_values(
        self, *, username: str, instance_id: str, values: Mapping[str, Sequence[str]]
    ) -> None:
        """Upsert every preference in ``values`` in a single transaction."""

        for name, preference_values in values.items():
            model = self._get_model(username=username, instance_id=instance_id, name=name)
            if model is None:
                model = PortalPreferenceModel(
                    username=username, instance_id=instance_id, name=name
                )
            model.preference_values = list(preference_values)
            self.session.add(model)
        self.session.commit()

    def _get_model(
        self, *, username: str, instance_id: str, name: str
    ) -> PortalPreferenceModel | None:
        return (
            self.session.query(PortalPreferenceModel)
            .filter(PortalPreferenceModel.username == username)
            .filter(PortalPreferenceModel.instance_id == instance_id)
            .filter(PortalPreferenceModel.name == name)
            .one_or_none()
        )


__all__ = ["PortalPreferenceRepository"]
