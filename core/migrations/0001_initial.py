# Initial schema for users and organization student links

import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('auth', '0012_alter_user_first_name_max_length'),
    ]

    operations = [
        migrations.CreateModel(
            name='User',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('password', models.CharField(max_length=128, verbose_name='password')),
                ('last_login', models.DateTimeField(blank=True, null=True, verbose_name='last login')),
                ('username', models.CharField(max_length=150, unique=True)),
                ('email', models.EmailField(max_length=254, unique=True)),
                ('name', models.CharField(blank=True, max_length=255)),
                ('role', models.CharField(
                    choices=[('student', 'Student'), ('organization', 'Organization'), ('admin', 'Admin')],
                    default='student',
                    max_length=20
                )),
                ('active', models.BooleanField(default=True)),
                ('roll_number', models.CharField(blank=True, max_length=50, null=True, unique=True)),
                ('course', models.CharField(blank=True, max_length=255)),
                ('year', models.CharField(blank=True, max_length=50)),
                ('is_staff', models.BooleanField(default=False)),
                ('is_superuser', models.BooleanField(default=False)),
                ('date_joined', models.DateTimeField(default=django.utils.timezone.now)),
                ('groups', models.ManyToManyField(
                    blank=True,
                    help_text='The groups this user belongs to. A user will get all permissions granted to each of their groups.',
                    related_name='user_set',
                    related_query_name='user',
                    to='auth.group',
                    verbose_name='groups'
                )),
                ('user_permissions', models.ManyToManyField(
                    blank=True,
                    help_text='Specific permissions for this user.',
                    related_name='user_set',
                    related_query_name='user',
                    to='auth.permission',
                    verbose_name='user permissions'
                )),
            ],
            options={
                'ordering': ['username'],
            },
        ),
        migrations.CreateModel(
            name='OrganizationStudent',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('roll_number', models.CharField(blank=True, max_length=50)),
                ('course', models.CharField(blank=True, max_length=255)),
                ('year', models.CharField(blank=True, max_length=50)),
                ('status', models.CharField(
                    choices=[('active', 'Active'), ('inactive', 'Inactive')],
                    default='active',
                    max_length=20
                )),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('organization', models.ForeignKey(
                    limit_choices_to={'role': 'organization'},
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='organization_students',
                    to=settings.AUTH_USER_MODEL
                )),
                ('student', models.ForeignKey(
                    limit_choices_to={'role': 'student'},
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='student_organizations',
                    to=settings.AUTH_USER_MODEL
                )),
            ],
            options={
                'ordering': ['organization', 'roll_number'],
                'constraints': [
                    models.UniqueConstraint(fields=('organization', 'student'), name='unique_organization_student'),
                ],
            },
        ),
    ]
