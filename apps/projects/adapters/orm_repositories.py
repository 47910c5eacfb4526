# apps/projects/adapters/orm_repositories.py
import logging
from typing import Any, List, Mapping, Optional

from django.db import transaction

from apps.core.adapters.orm_repositories import DjangoEntityRepository, storage_errors
from apps.core.domain.errors import FieldError, NotFound, ValidationFailure
from apps.core.forms import form_errors
from apps.core.wire import snake_keys
from apps.projects.domain.entities import MilestoneEntity, MilestoneStatus, ProjectEntity
from apps.projects.filters import ProjectFilter
from apps.projects.forms import MilestoneForm, ProjectForm
from apps.projects.models import Milestone, Project
from apps.projects.ports.repositories import IProjectRepository

logger = logging.getLogger(__name__)


class DjangoProjectRepository(DjangoEntityRepository, IProjectRepository):
    model = Project
    entity_class = ProjectEntity
    form_class = ProjectForm
    filterset_class = ProjectFilter

    def queryset(self):
        return Project.objects.prefetch_related('milestones')

    def milestone_to_entity(self, milestone: Milestone) -> MilestoneEntity:
        return MilestoneEntity(
            id=milestone.id,
            title=milestone.title,
            description=milestone.description,
            due_date=milestone.due_date,
            status=MilestoneStatus(milestone.status),
            completed_date=milestone.completed_date,
        )

    def entity_values(self, obj):
        values = super().entity_values(obj)
        values['milestones'] = [self.milestone_to_entity(m) for m in obj.milestones.all()]
        return values

    def average_progress(self) -> float:
        return self.average('progress')

    # ---- zapis z kamieniami milowymi ----

    def _milestone_forms(self, items) -> List[MilestoneForm]:
        if not isinstance(items, list):
            raise ValidationFailure.single('milestones', 'Milestones must be an array')

        milestone_forms, errors = [], []
        for index, item in enumerate(items):
            if not isinstance(item, dict):
                errors.append(FieldError(f'milestones[{index}]', 'Milestone must be an object'))
                continue
            form = MilestoneForm.for_create(snake_keys(item))
            if not form.is_valid():
                errors.extend(
                    FieldError(f'milestones[{index}].{e.field}', e.message) for e in form_errors(form)
                )
            milestone_forms.append(form)

        if errors:
            raise ValidationFailure(errors)
        return milestone_forms

    def _write(self, form, milestones: Optional[list]) -> Project:
        # Walidujemy wszystko przed jakimkolwiek zapisem
        errors = [] if form.is_valid() else form_errors(form)
        milestone_forms = None
        if milestones is not None:
            try:
                milestone_forms = self._milestone_forms(milestones)
            except ValidationFailure as e:
                errors.extend(e.errors)
        if errors:
            raise ValidationFailure(errors)

        with storage_errors(self.entity_name), transaction.atomic():
            project = form.save()
            if milestone_forms is not None:
                # Lista z panelu zastępuje dotychczasowe kamienie milowe
                project.milestones.all().delete()
                for milestone_form in milestone_forms:
                    milestone = milestone_form.save(commit=False)
                    milestone.project = project
                    milestone.save()
        return project

    def create(self, data: Mapping[str, Any]) -> ProjectEntity:
        data = dict(data)
        milestones = data.pop('milestones', None)
        project = self._write(ProjectForm.for_create(data), milestones)
        logger.info("Project created id=%s", project.pk)
        return self.get_by_id(project.pk)

    def update(self, entity_id: int, data: Mapping[str, Any]) -> Optional[ProjectEntity]:
        obj = self._get_model(entity_id)
        if obj is None:
            return None
        data = dict(data)
        milestones = data.pop('milestones', None)
        self._write(ProjectForm.for_update(obj, data), milestones)
        logger.info("Project updated id=%s fields=%s", entity_id, sorted(data))
        return self.get_by_id(entity_id)

    def add_milestone(self, project_id: int, data: Mapping[str, Any]) -> ProjectEntity:
        project = self._get_model(project_id)
        if project is None:
            raise NotFound('Project', project_id)

        form = MilestoneForm.for_create(data)
        if not form.is_valid():
            raise ValidationFailure(form_errors(form))

        with storage_errors(self.entity_name), transaction.atomic():
            milestone = form.save(commit=False)
            milestone.project = project
            milestone.save()
            # Zmiana kamieni milowych to zmiana projektu
            project.save(update_fields=['updated_at'])
        return self.get_by_id(project_id)

    def update_milestone(self, project_id: int, milestone_id: int, data: Mapping[str, Any]) -> ProjectEntity:
        project = self._get_model(project_id)
        if project is None:
            raise NotFound('Project', project_id)
        with storage_errors(self.entity_name):
            milestone = project.milestones.filter(pk=milestone_id).first()
        if milestone is None:
            raise NotFound('Milestone', milestone_id)

        form = MilestoneForm.for_update(milestone, data)
        if not form.is_valid():
            raise ValidationFailure(form_errors(form))

        with storage_errors(self.entity_name), transaction.atomic():
            form.save()
            project.save(update_fields=['updated_at'])
        return self.get_by_id(project_id)
