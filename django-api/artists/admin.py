from django.contrib import admin
from django.db.models import Count

from artists.models import Artist, ArtistMusicStyle, MusicStyle


class ArtistMusicStyleInline(admin.TabularInline):
    model = ArtistMusicStyle
    extra = 1


@admin.register(MusicStyle)
class MusicStyleAdmin(admin.ModelAdmin):
    list_display = ["style_name", "usage_count", "created_at"]
    search_fields = ["style_name"]

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(_usage_count=Count("artist_links"))

    @admin.display(ordering="_usage_count")
    def usage_count(self, obj):
        return obj._usage_count


@admin.register(Artist)
class ArtistAdmin(admin.ModelAdmin):
    list_display = ["artist_name", "id", "created_at"]
    search_fields = ["artist_name", "biography"]
    inlines = [ArtistMusicStyleInline]
