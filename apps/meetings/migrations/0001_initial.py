import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('projects', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Meeting',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
                ('meeting_date', models.DateTimeField()),
                ('start_time', models.CharField(max_length=5, validators=[django.core.validators.RegexValidator('^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$', 'Invalid start time format (HH:MM)')])),
                ('end_time', models.CharField(max_length=5, validators=[django.core.validators.RegexValidator('^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$', 'Invalid end time format (HH:MM)')])),
                ('duration', models.PositiveIntegerField(help_text='Minuty', validators=[django.core.validators.MinValueValidator(1)])),
                ('location', models.CharField(blank=True, max_length=255)),
                ('meeting_type', models.CharField(choices=[('in-person', 'in-person'), ('video-call', 'video-call'), ('phone-call', 'phone-call')], default='in-person', max_length=20)),
                ('meeting_link', models.CharField(blank=True, max_length=500)),
                ('organizer', models.CharField(max_length=200)),
                ('participants', models.JSONField(blank=True, default=list)),
                ('agenda', models.TextField(blank=True)),
                ('status', models.CharField(choices=[('scheduled', 'scheduled'), ('ongoing', 'ongoing'), ('completed', 'completed'), ('cancelled', 'cancelled')], default='scheduled', max_length=20)),
                ('priority', models.CharField(choices=[('low', 'low'), ('medium', 'medium'), ('high', 'high')], default='medium', max_length=10)),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('project', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='meetings', to='projects.project')),
            ],
        ),
    ]
