"""
Management command to repair room statuses from the tenants table.

A room is occupied exactly when it has an active tenant (no move-out date).
Use this after importing data or after edits made outside the application.

Usage:
    python manage.py reconcile_rooms
    python manage.py reconcile_rooms --dry-run
"""

from django.core.management.base import BaseCommand
from core.constants import RoomStatus
from properties.models import Room
from occupancy.services import OccupancyService


class Command(BaseCommand):
    help = 'Recompute every room status from its active tenants'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show which rooms are out of sync without changing them',
        )

    def handle(self, *args, **options):
        dry_run = options['dry_run']
        service = OccupancyService()

        if dry_run:
            self.stdout.write(self.style.WARNING("DRY RUN MODE - No rooms will be changed\n"))

        rooms = Room.objects.select_related('property').order_by('property__name', 'room_number')
        total = rooms.count()
        changed = 0

        for room in rooms:
            location = f"{room.property.name} - {room.room_number}"
            if dry_run:
                has_tenant = room.active_tenants().exists()
                out_of_sync = has_tenant != (room.status == RoomStatus.OCCUPIED)
                if out_of_sync:
                    changed += 1
                    self.stdout.write(f"  ! {location} - status '{room.status}' disagrees with tenants")
                continue

            if service.reconcile_room(room.id):
                changed += 1
                room.refresh_from_db(fields=['status'])
                self.stdout.write(self.style.SUCCESS(f"  + {location} - now {room.status}"))

        self.stdout.write(f"\nRooms checked: {total}")
        if dry_run:
            self.stdout.write(self.style.WARNING(f"Would change: {changed}"))
        else:
            self.stdout.write(self.style.SUCCESS(f"Changed: {changed}"))
