"""Notesアプリケーションのビュー。"""

from django.contrib.auth.decorators import login_required
from django.http import HttpRequest, HttpResponse

from shared import entity_views
from shared.entity_views import EntityConfig

from .forms import NoteForm
from .models import Note

NOTE_ENTITY = EntityConfig(
    model=Note,
    form_class=NoteForm,
    label="note",
    plural_label="notes",
    template_dir="notes",
    list_element_id="note-list",
)


@login_required
def note_list(request: HttpRequest) -> HttpResponse:
    return entity_views.render_list_page(request, NOTE_ENTITY)


@login_required
def note_items(request: HttpRequest) -> HttpResponse:
    return entity_views.render_list_partial(request, NOTE_ENTITY)


@login_required
def new_note_form(request: HttpRequest) -> HttpResponse:
    return entity_views.render_form(request, NOTE_ENTITY)


@login_required
def edit_note_form(request: HttpRequest, item_id: int) -> HttpResponse:
    return entity_views.render_form(request, NOTE_ENTITY, item_id=item_id)


@login_required
def create_note(request: HttpRequest) -> HttpResponse:
    return entity_views.handle_save(request, NOTE_ENTITY)


@login_required
def update_note(request: HttpRequest, item_id: int) -> HttpResponse:
    return entity_views.handle_save(request, NOTE_ENTITY, item_id=item_id)


@login_required
def delete_note(request: HttpRequest, item_id: int) -> HttpResponse:
    return entity_views.handle_delete(request, NOTE_ENTITY, item_id=item_id)
