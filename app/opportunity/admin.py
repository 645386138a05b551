from django.contrib import admin
from opportunity.models import Application, Category, Opportunity


class CategoryAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "created_at")
    search_fields = ("name",)
    ordering = ("name",)


class OpportunityAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "title",
        "category",
        "owner",
        "published_at",
        "created_at",
        "updated_at",
    )
    list_filter = ("category", "published_at", "created_at")
    search_fields = ("title", "description", "owner__username", "owner__email")
    ordering = ("-created_at",)
    raw_id_fields = ("owner",)


class ApplicationAdmin(admin.ModelAdmin):
    list_display = ("id", "opportunity", "full_name", "email", "created_at")
    list_filter = ("created_at",)
    search_fields = ("full_name", "email", "opportunity__title")
    ordering = ("-created_at",)
    raw_id_fields = ("opportunity", "applicant")


admin.site.register(Category, CategoryAdmin)
admin.site.register(Opportunity, OpportunityAdmin)
admin.site.register(Application, ApplicationAdmin)
