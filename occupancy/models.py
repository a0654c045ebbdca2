from django.db import models
from core.constants import MoveType
from core.exceptions import BusinessLogicError
from properties.models import Room
from tenants.models import Tenant


class MoveHistory(models.Model):
    """
    Append-only audit trail of move-ins and move-outs.

    Rows are never edited or deleted by the application. When the room or
    tenant is deleted the reference is nulled and the row stays.
    """
    room = models.ForeignKey(Room, on_delete=models.SET_NULL, related_name='move_histories',
                             null=True, blank=True)
    tenant = models.ForeignKey(Tenant, on_delete=models.SET_NULL, related_name='move_histories',
                               null=True, blank=True)
    move_type = models.CharField(max_length=3, choices=MoveType.choices)
    move_date = models.DateField()
    notes = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-move_date', '-created_at']
        verbose_name = "Move History"
        verbose_name_plural = "Move Histories"
        indexes = [
            models.Index(fields=['room', 'move_date'], name='movehist_room_date_idx'),
            models.Index(fields=['tenant', 'move_date'], name='movehist_tenant_date_idx'),
            models.Index(fields=['move_date'], name='movehist_date_idx'),
        ]

    def __str__(self):
        tenant_name = self.tenant.name if self.tenant_id else "(deleted tenant)"
        return f"{self.get_move_type_display()} - {tenant_name} - {self.move_date}"

    def save(self, *args, **kwargs):
        """History rows can only be inserted"""
        if not self._state.adding:
            raise BusinessLogicError(
                message="Move history is append-only",
                code="MOVE_HISTORY_IMMUTABLE"
            )
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise BusinessLogicError(
            message="Move history is append-only",
            code="MOVE_HISTORY_IMMUTABLE"
        )
