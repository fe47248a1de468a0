from django.db import models


class Department(models.Model):
    """
    Department a person can be assigned to.

    The five allowed departments are seeded by migration; further rows are
    only created by DepartmentDirectory.resolve(). Departments are never
    renamed or deleted.
    """
    name = models.CharField(max_length=50, unique=True)

    class Meta:
        db_table = 'department'
        ordering = ['id']

    def __str__(self):
        return self.name
