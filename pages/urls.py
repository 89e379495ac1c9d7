from django.urls import path
from . import views

app_name = 'pages'

urlpatterns = [
    path('<slug:slug>/', views.page_detail, name='page_detail'),
    path('<slug:slug>/fichiers/', views.page_files, name='page_files'),
]
