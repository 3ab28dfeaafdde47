# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""RegistrationForm - Example form bound to a user record.

A didactic example showing data binding, label correlation and inline
field errors.
"""

from __future__ import annotations

from genro_markup import MarkupBuilder, Name, RecordSource


class RegistrationForm:
    """A registration form rendered from a user record.

    This is the "cover" class that wraps a MarkupBuilder and knows the
    layout of one form.

    Example:
        >>> record = RecordSource({'username': 'bobama', 'plan': 'pro'})
        >>> record.errors['username'] = ['Username already used.']
        >>> form = RegistrationForm(record)
        >>> print(form.render(pretty=True))
    """

    PLANS = {'free': 'Free', 'pro': 'Pro', 'team': 'Team'}

    def __init__(self, record: RecordSource | None = None, action: str = '/register'):
        """Create a new form.

        Args:
            record: The user record supplying values and errors.
            action: The form's submit URL.
        """
        self._builder = MarkupBuilder(record)
        self._action = action

    @property
    def builder(self) -> MarkupBuilder:
        """Access the underlying MarkupBuilder."""
        return self._builder

    def _fields(self, b: MarkupBuilder) -> None:
        b.style(_content=lambda b: 'warn { color: red; }')
        b.label(Name('username'), 'Username')
        b.text(Name('username'), size=20)
        b.br()
        b.label(Name('email'), 'Email')
        b.email(Name('email'))
        b.br()
        b.label(Name('plan'), 'Plan')
        b.select('plan', {}, self.PLANS)
        b.br()
        b.label(Name('bio'), 'About you')
        b.textarea(Name('bio'), rows=4, cols=50)
        b.br()
        b.checkbox('newsletter', {}, {'news': 'News', 'offers': 'Offers'})
        b.submit('Register')

    def render(self, pretty: bool = False) -> str:
        """Render the form.

        Args:
            pretty: Return indented output instead of a single line.
        """
        b = self._builder.clear()
        b.form(action=self._action, method='post', _content=self._fields)
        b.alink('Already registered?', {'href': '/login'}, {'next': self._action})
        return b.pretty() if pretty else b.compact()


if __name__ == '__main__':
    record = RecordSource({
        'username': 'bobama',
        'email': 'bob@example.com',
        'plan': 'pro',
        'bio': 'Line 1',
        'newsletter': 'news',
    })
    record.errors['username'] = ['Username already used.']
    print(RegistrationForm(record).render(pretty=True))
