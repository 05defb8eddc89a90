from django.urls import path
from . import views

urlpatterns = [
    path('organization/students/bulk/', views.organization_students_bulk, name='organization-students-bulk'),
    path('organization/students/credentials/pdf/', views.organization_credentials_pdf, name='organization-credentials-pdf'),
]
