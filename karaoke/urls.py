"""karaoke URL Configuration

The queue API is mounted at the site root, so the routes are /add, /next, /singers and so on.
The admin is kept for editing runtime config (constance) and feature flags.
"""
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls, name='admin'),
    path('', include('singer_queue.urls')),
]
