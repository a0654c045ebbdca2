"""
Repository pattern implementation.
Abstracts data access and provides a clean interface for domain services.
"""
from typing import Generic, TypeVar, Optional
from django.db.models import QuerySet, Model
import logging

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=Model)


class BaseRepository(Generic[T]):
    """
    Base repository providing common CRUD operations.
    Follows Repository pattern for data access abstraction.
    """

    def __init__(self, model: type[T]):
        self.model = model

    def get_by_id(self, id: int, **filters) -> Optional[T]:
        """Get a single instance by ID"""
        return self.model.objects.filter(id=id, **filters).first()

    def get_for_update(self, id: int, **filters) -> Optional[T]:
        """
        Get a single instance by ID and lock its row until the surrounding
        transaction ends. Must be called inside transaction.atomic().
        """
        return self.model.objects.select_for_update().filter(id=id, **filters).first()

    def get_all(self, **filters) -> QuerySet[T]:
        """Get all instances matching filters"""
        return self.model.objects.filter(**filters)

    def create(self, **kwargs) -> T:
        """Create a new instance"""
        return self.model.objects.create(**kwargs)

    def update(self, instance: T, **kwargs) -> T:
        """Update an existing instance (only the given fields are written)"""
        for key, value in kwargs.items():
            setattr(instance, key, value)
        update_fields = list(kwargs.keys())
        if hasattr(instance, 'updated_at'):
            update_fields.append('updated_at')
        instance.save(update_fields=update_fields)
        return instance

    def delete(self, instance: T) -> None:
        """Delete an instance"""
        logger.debug(f"Deleting {self.model.__name__} {instance.pk}")
        instance.delete()

    def get_queryset(self) -> QuerySet[T]:
        """Get base queryset for custom queries"""
        return self.model.objects.all()
