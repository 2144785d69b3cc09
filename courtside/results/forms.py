from django import forms
from django.conf import settings
from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _

from courtside.result_core.errors import Rejection
from courtside.result_core.formats import code_label, codes_for, parse_result_code
from courtside.result_core.structure import MatchFormat, MatchResultRecord, Side
from courtside.result_core.super_tiebreak import is_applicable, super_tiebreak_warning
from courtside.result_core.tiebreaks import (
    NO_TIEBREAK,
    is_tiebreak_set,
    tiebreak_score_options,
)
from courtside.result_core.transitions import (
    MatchWinnerChosen,
    ResultCodeChosen,
    SetScoreEntered,
    SetWinnerChosen,
    SuperTiebreakScoreEntered,
    TiebreakScoreEntered,
    apply_event,
    new_record,
    prepare_for_submission,
)
from courtside.result_core.validation import validate
from courtside.results.collaborators import MatchDescriptor

# Most set fields a format can show; the amateur third set is a super tiebreak
FORM_SET_FIELDS = {
    MatchFormat.STANDARD_BO3: 3,
    MatchFormat.AMATEUR_BO3_SUPER_TIEBREAK: 2,
    MatchFormat.BO5: 5,
}


def result_entry_setting(name, default=None):
    return getattr(settings, 'COURTSIDE_RESULT_ENTRY', {}).get(name, default)


class MatchResultForm(forms.Form):
    """Operator form for adding or editing the result of one match.

    The posted fields are replayed as engine events on a fresh record, so the
    form applies exactly the derivations the interactive flow applies. The
    record to persist is available as `cleaned_data['record']`.
    """

    winner = forms.ChoiceField(label=_('Match Winner'), widget=forms.RadioSelect)
    match_result = forms.ChoiceField(label=_('Match Result'))

    def __init__(self, *args, match: MatchDescriptor, allow_retirements=None, **kwargs):
        self.match = match
        if allow_retirements is None:
            allow_retirements = result_entry_setting('ALLOW_RETIREMENTS', True)
        self.allow_retirements = allow_retirements
        # Non-blocking notes about accepted values, filled by clean()
        self.warnings = []
        super(MatchResultForm, self).__init__(*args, **kwargs)

        side_choices = [
            (Side.HOME.value, match.home_name or _('Home')),
            (Side.AWAY.value, match.away_name or _('Away')),
        ]
        self.fields['winner'].choices = side_choices

        codes = []
        for side in Side:
            codes += codes_for(match.format, side, include_retirements=allow_retirements)
        self.fields['match_result'].choices = [
            (str(code), code_label(match.format, code)) for code in codes
        ]

        tiebreak_choices = [(NO_TIEBREAK, _('No tiebreak'))] + [
            (option, option) for option in tiebreak_score_options()
        ]
        for set_number in range(1, FORM_SET_FIELDS[match.format] + 1):
            self.fields['set%d_winner' % set_number] = forms.ChoiceField(
                required=False,
                label=_('Set %d winner') % set_number,
                choices=[('', _('Select winner'))] + side_choices,
            )
            self.fields['set%d_score' % set_number] = forms.CharField(
                required=False,
                max_length=5,
                label=_('Set %d score') % set_number,
                help_text=_("Games of the set's winner first, e.g. 6-4 or 7-6"),
            )
            self.fields['set%d_tiebreak_score' % set_number] = forms.ChoiceField(
                required=False,
                label=_('Set %d tiebreak') % set_number,
                choices=tiebreak_choices,
            )

        if match.format is MatchFormat.AMATEUR_BO3_SUPER_TIEBREAK:
            self.fields['super_tiebreak_score'] = forms.CharField(
                required=False,
                max_length=7,
                label=_('Super Tiebreak Score'),
                help_text=_('10-point match tiebreak played instead of a third set, '
                            'winner first, e.g. 10-8'),
            )

    @staticmethod
    def initial_for(record: MatchResultRecord) -> dict:
        """Initial form values for editing an existing (re-hydrated) record."""
        initial = {
            'winner': record.winner.value if record.winner else '',
            'match_result': str(record.result_code) if record.result_code else '',
        }
        for set_number, set_record in enumerate(record.sets, start=1):
            initial['set%d_winner' % set_number] = (
                set_record.winner.value if set_record.winner else ''
            )
            initial['set%d_score' % set_number] = set_record.score or ''
            initial['set%d_tiebreak_score' % set_number] = (
                set_record.tiebreak_score or NO_TIEBREAK
            )
        if record.super_tiebreak is not None:
            initial['super_tiebreak_score'] = record.super_tiebreak.score or ''
        return initial

    def _apply(self, record, event, field_name):
        outcome = apply_event(record, event)
        if isinstance(outcome, Rejection):
            raise ValidationError({
                field_name: ValidationError(outcome.message, code=outcome.kind.value)
            })
        return outcome

    def clean(self):
        cleaned_data = super(MatchResultForm, self).clean()
        if self.errors:
            return cleaned_data

        code = parse_result_code(cleaned_data['match_result'])
        if isinstance(code, Rejection):
            raise ValidationError({
                'match_result': ValidationError(code.message, code=code.kind.value)
            })

        record = new_record(self.match.format, self.match.participants)
        record = self._apply(record, MatchWinnerChosen(Side(cleaned_data['winner'])), 'winner')
        record = self._apply(record, ResultCodeChosen(code), 'match_result')

        for set_number in range(1, len(record.sets) + 1):
            prefix = 'set%d_' % set_number
            posted_winner = cleaned_data.get(prefix + 'winner')
            if posted_winner:
                record = self._apply(
                    record, SetWinnerChosen(set_number, Side(posted_winner)), prefix + 'winner'
                )
            posted_score = cleaned_data.get(prefix + 'score')
            if posted_score:
                record = self._apply(
                    record, SetScoreEntered(set_number, posted_score), prefix + 'score'
                )
            posted_tiebreak = cleaned_data.get(prefix + 'tiebreak_score')
            # A select left over from an earlier 7-6 score is ignored
            if (
                posted_tiebreak
                and posted_tiebreak != NO_TIEBREAK
                and is_tiebreak_set(record.set_record(set_number).score)
            ):
                record = self._apply(
                    record,
                    TiebreakScoreEntered(set_number, posted_tiebreak),
                    prefix + 'tiebreak_score',
                )

        if is_applicable(record.format, record.result_code):
            record = self._apply(
                record,
                SuperTiebreakScoreEntered(cleaned_data.get('super_tiebreak_score')),
                'super_tiebreak_score',
            )
            warning = super_tiebreak_warning(record.super_tiebreak.score)
            if warning:
                self.warnings.append(warning)

        record = prepare_for_submission(record)
        outcome = validate(record)
        if not outcome:
            raise ValidationError(outcome.rejection.message, code=outcome.rejection.kind.value)

        cleaned_data['record'] = record
        return cleaned_data
