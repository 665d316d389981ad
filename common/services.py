"""Generic model service.

``ModelService`` wraps the CRUD pass-throughs every entity service needs.
Lookups that miss return ``None`` (``False`` for ``exists``); they never
raise. Subclasses set ``model`` and add entity-specific queries.
"""

import logging
from typing import Any, Dict, Optional


class ModelService:
    """CRUD operations over a single Django model."""

    model = None

    def __init__(self, model=None, logger: Optional[logging.Logger] = None):
        """
        Args:
            model: Django model class; defaults to the class attribute.
            logger: Logger used for service messages; defaults to the module logger.
        """
        if model is not None:
            self.model = model
        if self.model is None:
            raise ValueError(f"{type(self).__name__} requires a model.")
        self.logger = logger or logging.getLogger(type(self).__module__)

    def get_queryset(self):
        return self.model.objects.all()

    def create(self, dto: Dict[str, Any]):
        return self.model.objects.create(**dto)

    def find_by_id(self, pk):
        return self.get_queryset().filter(pk=pk).first()

    def update_by_id(self, pk, dto: Dict[str, Any]):
        """Apply a partial update; only keys present in ``dto`` change."""
        instance = self.find_by_id(pk)
        if instance is None:
            return None
        for attr, value in dto.items():
            setattr(instance, attr, value)
        if dto:
            instance.save()
        return instance

    def delete_by_id(self, pk):
        """Delete and return the record, or ``None`` if it does not exist."""
        instance = self.find_by_id(pk)
        if instance is None:
            self.logger.debug("%s #%s not found for deletion", self.model.__name__, pk)
            return None
        instance.delete()
        self.logger.info("%s #%s deleted", self.model.__name__, pk)
        return instance

    def exists(self, pk) -> bool:
        return self.model.objects.filter(pk=pk).exists()
