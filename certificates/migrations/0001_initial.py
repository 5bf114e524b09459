from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Certificate',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('certificate_id', models.CharField(help_text='Public certificate ID, e.g. BMS-2024-WD-000123', max_length=50, unique=True)),
                ('student_name', models.CharField(max_length=255)),
                ('course_name', models.CharField(max_length=255)),
                ('completion_date', models.DateField()),
                ('issue_date', models.DateField()),
                ('grade', models.CharField(max_length=32)),
                ('instructor', models.CharField(max_length=255)),
                ('duration', models.CharField(help_text='e.g. 12 weeks', max_length=64)),
                ('skills', models.JSONField(blank=True, default=list)),
                ('credential_url', models.CharField(blank=True, editable=False, max_length=512)),
                ('is_valid', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'ordering': ['-created_at'],
            },
        ),
    ]
