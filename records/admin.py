"""
Django admin registrations for the records models.

This module hooks the records models into Django's built-in admin
interface so that superusers can inspect data via the ``/admin/`` URL.
Dependents are shown inline on the patient page.  The admin account
password column is read-only here: it only ever holds a hash.
"""

from django.contrib import admin

from . import models


class EmergencyContactInline(admin.TabularInline):
    model = models.EmergencyContact
    extra = 0


class PhysicalInformationInline(admin.TabularInline):
    model = models.PhysicalInformation
    extra = 0


class DoctorDiagnosisInline(admin.StackedInline):
    model = models.DoctorDiagnosis
    extra = 0
    max_num = 1


class LabResultInline(admin.TabularInline):
    model = models.LabResult
    extra = 0
    readonly_fields = ('created_at',)


@admin.register(models.Admin)
class AdminAccountAdmin(admin.ModelAdmin):
    list_display = ('email', 'full_name', 'role', 'created_at')
    list_filter = ('role',)
    search_fields = ('email', 'full_name')
    readonly_fields = ('password', 'created_at')


@admin.register(models.Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ('id', 'first_name', 'last_name', 'email', 'gender', 'blood_type', 'city')
    list_filter = ('gender', 'blood_type', 'state')
    search_fields = ('first_name', 'last_name', 'email', 'phone_number')
    inlines = [EmergencyContactInline, PhysicalInformationInline, DoctorDiagnosisInline, LabResultInline]


@admin.register(models.LabResult)
class LabResultAdmin(admin.ModelAdmin):
    list_display = ('id', 'patient', 'doctor', 'created_at')
    list_filter = ('doctor',)
    search_fields = ('message', 'patient__email', 'doctor__email')
