import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Goal',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
                ('target_value', models.FloatField(validators=[django.core.validators.MinValueValidator(0)])),
                ('current_value', models.FloatField(default=0, validators=[django.core.validators.MinValueValidator(0)])),
                ('unit', models.CharField(default='units', max_length=50)),
                ('category', models.CharField(choices=[('personal', 'personal'), ('work', 'work'), ('health', 'health'), ('learning', 'learning'), ('financial', 'financial'), ('other', 'other')], default='work', max_length=20)),
                ('priority', models.CharField(choices=[('low', 'low'), ('medium', 'medium'), ('high', 'high')], default='medium', max_length=10)),
                ('status', models.CharField(choices=[('active', 'active'), ('completed', 'completed'), ('paused', 'paused'), ('cancelled', 'cancelled')], default='active', max_length=20)),
                ('start_date', models.DateTimeField()),
                ('target_date', models.DateTimeField()),
                ('completed_date', models.DateTimeField(blank=True, null=True)),
                ('color', models.CharField(default='#10b981', max_length=7, validators=[django.core.validators.RegexValidator('^#[0-9a-fA-F]{6}$', 'Color must be a hex value like #10b981')])),
                ('tags', models.JSONField(blank=True, default=list)),
                ('milestones', models.JSONField(blank=True, default=list)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
        ),
    ]
