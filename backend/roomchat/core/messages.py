"""User-facing envelope messages."""
from __future__ import annotations

# user
USER_ADDED = "ユーザーの追加に成功しました"
USER_ADD_FAILED = ""
USER_FOUND = "ユーザーが見つかりました"
USER_NOT_FOUND = "条件に該当するユーザーが見つかりませんでした"
USER_SEARCH_FAILED = "ユーザーの検索中にエラーが発生しました"
USER_DELETED = "削除に成功しました!"
USER_DELETE_NOT_FOUND = "削除するUserが見つかりませんでした"
USER_DELETE_FAILED = "ユーザーの削除中にエラーが発生しました"

# room
ROOM_CREATED = "ルームの作成に成功しました"
ROOM_CREATE_FAILED = "ルームの作成に失敗しました"
ROOM_ENTERED = "ルームへの入室に成功しました"
ROOM_ENTER_NOT_FOUND = "条件に該当するルームが見つかりませんでした"
ROOM_ENTER_FAILED = "ルームへの入室に失敗しました"

# message
MESSAGE_FETCHED = "メッセージの取得に成功しました"
MESSAGE_FETCH_FAILED = "メッセージの取得に失敗しました"
MESSAGE_SENT = "メッセージの送信に成功しました"
MESSAGE_SEND_NOT_FOUND = "送信先のルームが見つかりませんでした"
MESSAGE_SEND_FAILED = "メッセージの送信に失敗しました"

# fail-fast
ROOM_MISSING = "指定されたルームが存在しません"
MESSAGE_UNSET = "ルームにメッセージが存在しません"
