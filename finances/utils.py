"""
Utilities for finance reports.
"""
from django.http import HttpResponse
import csv


def export_finance_report(entries, year, month):
    """
    Export finance entries to CSV

    Args:
        entries: QuerySet of Finance objects
        year, month: Period shown in the file name

    Returns:
        HttpResponse with the CSV attachment
    """
    response = HttpResponse(content_type='text/csv')
    response['Content-Disposition'] = f'attachment; filename="finances_{year}{month:02d}.csv"'

    writer = csv.writer(response)
    writer.writerow(['Date', 'Property', 'Room', 'Type', 'Category', 'Amount', 'Description'])

    for entry in entries:
        writer.writerow([
            entry.date.strftime('%Y-%m-%d'),
            entry.property.name,
            entry.room.room_number if entry.room_id else '',
            entry.get_type_display(),
            entry.get_category_display(),
            str(entry.amount),
            entry.description or '',
        ])

    return response
