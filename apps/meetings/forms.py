# apps/meetings/forms.py
from apps.core.forms import EntityForm, clean_object_list, optional_email, require_choice, require_text
from .domain.entities import ParticipantStatus
from .models import Meeting

PARTICIPANT_STATUSES = {s.value for s in ParticipantStatus}


class MeetingForm(EntityForm):
    json_list_fields = ('participants',)

    class Meta:
        model = Meeting
        fields = [
            'title', 'description', 'meeting_date', 'start_time', 'end_time', 'duration',
            'location', 'meeting_type', 'meeting_link', 'organizer', 'participants',
            'agenda', 'status', 'priority', 'project', 'notes',
        ]
        error_messages = {
            'title': {'required': 'Title is required'},
            'meeting_date': {
                'required': 'Valid meeting date is required',
                'invalid': 'Valid meeting date is required',
            },
            'start_time': {'required': 'Invalid start time format (HH:MM)'},
            'end_time': {'required': 'Invalid end time format (HH:MM)'},
            'duration': {
                'required': 'Duration must be a positive number',
                'invalid': 'Duration must be a positive number',
                'min_value': 'Duration must be a positive number',
            },
            'organizer': {'required': 'Organizer is required'},
            'meeting_type': {'invalid_choice': 'Invalid meeting type'},
            'status': {'invalid_choice': 'Invalid status'},
            'priority': {'invalid_choice': 'Invalid priority'},
            'project': {'invalid_choice': 'Project not found'},
        }

    def clean_participants(self):
        def clean_participant(participant, index):
            require_text(participant, 'name', 'Participant name is required')
            optional_email(participant, 'email', 'Invalid participant email')
            require_choice(participant, 'status', PARTICIPANT_STATUSES,
                           ParticipantStatus.PENDING.value, 'Invalid participant status')
            return participant

        # Panel wysyła uczestników jako listę nazw
        return clean_object_list(self.cleaned_data.get('participants'), 'Participants',
                                 clean_participant, shorthand_key='name')
