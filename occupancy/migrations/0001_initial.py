import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('properties', '0001_initial'),
        ('tenants', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='MoveHistory',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('move_type', models.CharField(choices=[('in', 'Move In'), ('out', 'Move Out')], max_length=3)),
                ('move_date', models.DateField()),
                ('notes', models.TextField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('room', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='move_histories', to='properties.room')),
                ('tenant', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='move_histories', to='tenants.tenant')),
            ],
            options={
                'verbose_name': 'Move History',
                'verbose_name_plural': 'Move Histories',
                'ordering': ['-move_date', '-created_at'],
                'indexes': [
                    models.Index(fields=['room', 'move_date'], name='movehist_room_date_idx'),
                    models.Index(fields=['tenant', 'move_date'], name='movehist_tenant_date_idx'),
                    models.Index(fields=['move_date'], name='movehist_date_idx'),
                ],
            },
        ),
    ]
