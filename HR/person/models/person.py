from django.db import models

from .department import Department


class Person(models.Model):
    """
    Roster entry.

    Do not save instances directly from views; create, update and delete
    go through PersonService so validation and duplicate detection apply.

    Uniqueness of (first_name, last_name, date_of_birth) is enforced by
    DuplicateDetector, not by a database constraint.
    """
    first_name = models.CharField(max_length=50)
    last_name = models.CharField(max_length=50)
    date_of_birth = models.DateField()
    department = models.ForeignKey(
        Department,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='people',
    )

    class Meta:
        db_table = 'person'
        ordering = ['id']
        indexes = [
            models.Index(fields=['first_name', 'last_name'], name='person_name_idx'),
        ]

    def __str__(self):
        return self.full_name

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"
