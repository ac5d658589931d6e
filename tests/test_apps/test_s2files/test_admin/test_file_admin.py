"""Tests for the File admin."""

from unittest import mock

import pytest
from django.contrib import messages
from django.contrib.admin.sites import AdminSite
from django.contrib.auth.models import Permission
from django.test import RequestFactory

from server.apps.s2files.admin import FileAdmin
from server.apps.s2files.models import File


@pytest.fixture
def file_admin():
    """FileAdmin bound to a throwaway admin site."""
    return FileAdmin(File, AdminSite())


def _staff_request(staff_user):
    staff_user.is_staff = True
    staff_user.save()
    staff_user.user_permissions.add(
        Permission.objects.get(
            codename='delete_file',
            content_type__app_label='s2files',
        ),
    )
    request = RequestFactory().post('/admin/s2files/file/')
    request.user = staff_user
    return request


@pytest.mark.django_db
class TestFileAdminDeletePermission:
    """Tests for FileAdmin.has_delete_permission."""

    def test_uploader_may_delete(self, file_admin, user, make_file):
        """Test staff uploader may delete their own file."""
        request = _staff_request(user)

        assert file_admin.has_delete_permission(request, make_file())

    def test_other_staff_may_not_delete(
        self,
        file_admin,
        user,
        other_user,
        make_file,
    ):
        """Test model permission alone does not allow deleting others' files."""
        request = _staff_request(user)
        file_instance = make_file(uploaded_by=other_user)

        assert not file_admin.has_delete_permission(request, file_instance)

    def test_admin_role_may_delete(
        self,
        file_admin,
        admin_member,
        other_user,
        make_file,
    ):
        """Test admin role holders may delete any file."""
        request = _staff_request(admin_member)
        file_instance = make_file(uploaded_by=other_user)

        assert file_admin.has_delete_permission(request, file_instance)

    def test_changelist_needs_model_permission(
        self,
        file_admin,
        user,
        other_user,
    ):
        """Test the bulk action still requires Django's model permission."""
        request = RequestFactory().get('/admin/s2files/file/')
        request.user = other_user

        assert not file_admin.has_delete_permission(request)
        assert file_admin.has_delete_permission(_staff_request(user))


@pytest.mark.django_db
def test_delete_queryset_reports_failures(
    file_admin,
    user,
    other_user,
    fake_storage,
    make_file,
):
    """Test bulk delete skips refused files and deletes the rest."""
    own_file = make_file(filename='own.txt', key='files/own.txt')
    foreign_file = make_file(
        filename='foreign.txt',
        key='files/foreign.txt',
        uploaded_by=other_user,
    )
    request = _staff_request(user)

    with mock.patch(
        'server.apps.s2files.logic.file_operations._get_storage',
        return_value=fake_storage,
    ), mock.patch.object(file_admin, 'message_user') as message_user:
        file_admin.delete_queryset(request, File.objects.all())

    assert not File.objects.filter(id=own_file.id).exists()
    assert File.objects.filter(id=foreign_file.id).exists()
    fake_storage.delete.assert_called_once_with('files/own.txt')
    message_user.assert_called_once()
    assert 'foreign.txt: Permission denied' in message_user.call_args.args[1]
    assert message_user.call_args.kwargs['level'] == messages.ERROR
