import logging

from django.db import DatabaseError, IntegrityError, transaction

from .exceptions import ConflictError, NotFoundError, StorageError

logger = logging.getLogger(__name__)


class ResourceService:
    """Create/list/update/delete over one model.

    Subclasses set:
      model                    the Django model
      create_serializer_class  validates public or admin create payloads
      update_serializer_class  whitelist of patchable fields (all optional)
      unique_field             model field that must be unique, if any
      unique_label             name of that field in the API payload

    Serializers only validate; every write goes through `save`.
    """
    model = None
    create_serializer_class = None
    update_serializer_class = None
    unique_field = None
    unique_label = None

    @property
    def resource_name(self):
        return self.model._meta.verbose_name.capitalize()

    def list(self):
        """All records, newest first."""
        return self.model.objects.order_by('-created_at')

    def get(self, pk):
        try:
            return self.model.objects.get(pk=pk)
        except (self.model.DoesNotExist, ValueError, TypeError):
            raise NotFoundError(f'{self.resource_name} not found')
        except DatabaseError as exc:
            raise StorageError() from exc

    def create(self, data):
        serializer = self.create_serializer_class(data=data)
        serializer.is_valid(raise_exception=True)
        values = self.prepare_create(dict(serializer.validated_data))
        self.check_unique(values)

        instance = self.model(**values)
        self.save(instance)
        logger.info(f"Created {self.model.__name__} id={instance.pk}")
        self.after_create(instance)
        return instance

    def update_by_id(self, pk, data):
        instance = self.get(pk)
        serializer = self.update_serializer_class(instance, data=data, partial=True)
        serializer.is_valid(raise_exception=True)
        values = dict(serializer.validated_data)
        self.check_unique(values, exclude_pk=instance.pk)

        for field, value in values.items():
            setattr(instance, field, value)
        self.save(instance)
        logger.info(f"Updated {self.model.__name__} id={instance.pk} fields={sorted(values)}")
        return instance

    def delete_by_id(self, pk):
        instance = self.get(pk)
        try:
            instance.delete()
        except DatabaseError as exc:
            raise StorageError() from exc
        logger.info(f"Deleted {self.model.__name__} id={pk}")
        return f'{self.resource_name} removed'

    # hooks

    def prepare_create(self, values):
        return values

    def after_create(self, instance):
        pass

    # helpers

    def check_unique(self, values, exclude_pk=None):
        if not self.unique_field or self.unique_field not in values:
            return
        qs = self.model.objects.filter(**{self.unique_field: values[self.unique_field]})
        if exclude_pk is not None:
            qs = qs.exclude(pk=exclude_pk)
        if qs.exists():
            raise self.conflict()

    def conflict(self):
        label = self.unique_label or self.unique_field
        return ConflictError(f'{self.resource_name} with this {label} already exists', field=label)

    def save(self, instance):
        try:
            with transaction.atomic():
                instance.save()
        except IntegrityError as exc:
            raise self.conflict() from exc
        except DatabaseError as exc:
            logger.error(f"Could not save {self.model.__name__}: {exc}")
            raise StorageError() from exc
