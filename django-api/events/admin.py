from django.contrib import admin

from events.models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["event_name", "artist", "venue_name", "city", "event_date", "event_time"]
    list_filter = ["country", "event_date"]
    search_fields = ["event_name", "venue_name", "city", "country", "artist__artist_name"]
    list_select_related = ["artist"]
