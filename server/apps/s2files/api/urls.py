from django.urls import path

from server.apps.s2files.api import views

app_name = 's2files'

urlpatterns = [
    path('', views.FileListCreateAPIView.as_view(), name='file-list'),
    path('<uuid:file_id>/', views.FileDetailAPIView.as_view(), name='file-detail'),
    path(
        '<uuid:file_id>/download-url/',
        views.FileDownloadUrlAPIView.as_view(),
        name='file-download-url',
    ),
]
