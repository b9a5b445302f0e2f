from tortoise import Model, fields


class Attraction(Model):
    id = fields.IntField(pk=True)
    name = fields.CharField(max_length=255)
    is_open = fields.BooleanField(default=False)

    def __str__(self):
        return f"[{self.id}] {self.name} ({'open' if self.is_open else 'closed'})"
