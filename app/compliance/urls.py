"""
URL configuration for the compliance app.

All routes are prefixed with /api/v1/compliance/ in config/urls.py.
"""

from django.urls import path

from compliance.views import CvuHistoryView, CvuSummaryView

app_name = "compliance"

urlpatterns = [
    path("cvu-summary/", CvuSummaryView.as_view(), name="cvu-summary"),
    path("cvu-history/", CvuHistoryView.as_view(), name="cvu-history"),
]
