import django.core.validators
import django.db.models.deletion
from decimal import Decimal
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('properties', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Finance',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('type', models.CharField(choices=[('income', 'Income'), ('expense', 'Expense')], max_length=10)),
                ('category', models.CharField(choices=[('rent', 'Rent'), ('management_fee', 'Management Fee'), ('deposit', 'Deposit'), ('key_money', 'Key Money'), ('other_income', 'Other Income'), ('repair', 'Repair'), ('utilities', 'Utilities'), ('insurance', 'Insurance'), ('tax', 'Tax'), ('cleaning', 'Cleaning'), ('other_expense', 'Other Expense')], max_length=30)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('description', models.TextField(blank=True, null=True)),
                ('date', models.DateField()),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('property', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='finances', to='properties.property')),
                ('room', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='finances', to='properties.room')),
            ],
            options={
                'verbose_name': 'Finance',
                'verbose_name_plural': 'Finances',
                'ordering': ['-date', '-created_at'],
                'indexes': [
                    models.Index(fields=['date'], name='finance_date_idx'),
                    models.Index(fields=['property', 'date'], name='finance_property_date_idx'),
                    models.Index(fields=['type', 'date'], name='finance_type_date_idx'),
                ],
            },
        ),
    ]
