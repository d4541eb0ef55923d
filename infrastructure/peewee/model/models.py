from peewee import AutoField, BooleanField, DateTimeField, Model, TextField
from infrastructure.peewee.session.db import db

class TaskModel(Model):
    id = AutoField()
    title = TextField()
    description = TextField(null=True)
    completed = BooleanField(default=False)
    created_at = DateTimeField()
    updated_at = DateTimeField()

    class Meta:
        database = db
        table_name = "tasks"
