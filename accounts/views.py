"""accountsアプリケーションのビュー。

サインイン、ユーザー登録、プロフィール編集を提供する。
"""

import logging

from django.contrib import messages
from django.contrib.auth import login
from django.contrib.auth.decorators import login_required
from django.contrib.auth.views import LoginView
from django.db import DatabaseError
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods

from personal_hub.auth import get_authenticated_user_id
from personal_hub.auth_forms import EmailAuthenticationForm
from shared.forms import first_form_error

from .forms import ProfileForm, SignUpForm
from .models import Profile

logger = logging.getLogger(__name__)


class SignInView(LoginView):
    """メールアドレスでのサインインビュー。

    検証エラーは最初の違反をトーストに表示する。
    """

    template_name = "account/login.html"
    authentication_form = EmailAuthenticationForm
    redirect_authenticated_user = True

    def form_valid(self, form):
        messages.success(self.request, "Successfully signed in")
        return super().form_valid(form)

    def form_invalid(self, form):
        logger.warning("サインインに失敗しました: errors=%s", form.errors.as_json())
        messages.error(self.request, first_form_error(form))
        return super().form_invalid(form)


@require_http_methods(["GET", "POST"])
def signup(request: HttpRequest) -> HttpResponse:
    """ユーザー登録ビュー。

    GETリクエスト: 登録フォームを表示する。
    POSTリクエスト: フォームを検証し、ユーザーを作成してサインインする。

    Args:
        request: HTTPリクエスト。

    Returns:
        登録フォームのレンダリング結果、または登録成功時のリダイレクト。
    """
    if request.user.is_authenticated:
        return redirect("dashboard:index")

    if request.method == "POST":
        form = SignUpForm(request.POST)
        if form.is_valid():
            try:
                user = form.save()
            except DatabaseError:
                logger.exception("ユーザー登録に失敗しました")
                messages.error(request, "Failed to create account")
            else:
                login(request, user)
                logger.info("ユーザーを登録しました: user_id=%s", user.pk)
                messages.success(request, "Welcome to PersonalHub")
                return redirect("dashboard:index")
        else:
            messages.error(request, first_form_error(form))
    else:
        form = SignUpForm()

    return render(request, "account/signup.html", {"form": form})


@login_required
@require_http_methods(["GET", "POST"])
def profile(request: HttpRequest) -> HttpResponse:
    """プロフィールの表示・編集ビュー。"""
    user_id = get_authenticated_user_id(request)
    profile_obj, _ = Profile.objects.get_or_create(
        user_id=user_id,
        defaults={"email": request.user.get_username()},
    )

    if request.method == "POST":
        form = ProfileForm(request.POST, instance=profile_obj)
        if form.is_valid():
            try:
                form.save()
            except DatabaseError:
                logger.exception("プロフィールの更新に失敗しました: user_id=%s", user_id)
                messages.error(request, "Failed to update profile")
            else:
                logger.info("プロフィールを更新しました: user_id=%s", user_id)
                messages.success(request, "Profile updated successfully")
                return redirect("accounts:profile")
        else:
            messages.error(request, first_form_error(form))
    else:
        form = ProfileForm(instance=profile_obj)

    return render(request, "account/profile.html", {"form": form, "profile": profile_obj})
