from django.contrib import admin

# Customize admin site
admin.site.site_header = "Rental Office - Admin Panel"
admin.site.site_title = "Rental Office Admin"
admin.site.index_title = "Properties, tenants and finances"
