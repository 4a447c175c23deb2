"""Typed views of the JSON documents returned by the frame service API."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import AwareDatetime, BaseModel

DOWNLOAD_BASE_URL = "https://imgproxy.pushd.com"

AssetId = str
AssetSettingId = str
AuthToken = str
DeliveredFrameGiftId = str
Email = str
Feature = str
FileName = str
FrameId = str
FrameEnvironmentId = str
FrameName = str
ImpressionId = str
Locale = str
TimeZone = str
Url = str
UserId = str
UserName = str


class Padding(BaseModel):
    """Fractional padding around a cropped image."""

    top: float
    right: float
    bottom: float
    left: float


class User(BaseModel):
    """A user as embedded in frames, assets and gifts."""

    id: UserId
    short_id: Any
    test_account: Any
    created_at: AwareDatetime
    updated_at: AwareDatetime
    latest_app_version: Any
    name: UserName
    email: Email
    attribution_id: Any
    attribution_string: Any
    show_push_prompt: bool
    avatar_file_name: Any
    analytics_optout: bool


class Asset(BaseModel):
    """A photo or video uploaded by a user."""

    id: AssetId
    user_id: UserId
    thumbnail_url: Optional[Url] = None
    portrait_url: Optional[Url] = None
    landscape_url: Optional[Url] = None
    widget_url: Optional[Url] = None
    minibar_url: Optional[Url] = None
    minibar_landscape_url: Optional[Url] = None
    minibar_portrait_url: Optional[Url] = None
    landscape_16_10_url: Optional[Url] = None
    portrait_4_5_url: Optional[Url] = None
    portrait_url_padding: Any
    landscape_url_padding: Any
    landscape_16_10_url_padding: Any
    portrait_4_5_url_padding: Optional[Padding] = None
    video_url: Any
    landscape_rect: Any
    portrait_rect: Any
    user_landscape_rect: Any
    user_portrait_rect: Any
    auto_landscape_16_10_rect: Any
    user_landscape_16_10_rect: Any
    auto_portrait_4_5_rect: Any
    user_portrait_4_5_rect: Any
    exif_orientation: int
    handled_at: AwareDatetime
    uploaded_at: AwareDatetime
    good_resolution: bool
    source_id: str
    duplicate_of_id: Any
    rotation_cw: int
    md5_hash: Optional[str] = None
    is_subscription: bool
    glaciered_at: AwareDatetime
    unglacierable: Optional[bool] = None
    duration: Any
    live_photo_off: Any
    attachments: list[Any]
    local_identifier: str
    created_at_on_client: Any
    selected: bool
    file_name: FileName
    raw_file_name: Any
    video_file_name: Any
    colorized_file_name: Any
    width: int
    height: int
    taken_at: AwareDatetime
    modified_at: Optional[AwareDatetime] = None
    horizontal_accuracy: Any
    favorite: Any
    orientation: Optional[int] = None
    hdr: Any
    panorama: Any
    is_live: Any
    burst_id: Any
    burst_selection_types: Any
    represents_burst: Any
    data_uti: FileName
    original_file_name: Optional[str] = None
    upload_priority: int
    ios_media_subtypes: Any
    taken_at_user_override_at: Any
    taken_at_granularity: Any
    duration_unclipped: Any
    video_clip_start: Any
    video_clip_excludes_audio: Any
    video_clipped_by_user_at: Any
    location: Any
    user: User

    def get_download_url(self) -> Url:
        """Return the URL the original file of this asset can be fetched from."""
        return self.create_download_url(self.user_id, self.file_name)

    @staticmethod
    def create_download_url(user_id: UserId, file_name: FileName) -> Url:
        """Return the download URL for a user's file."""
        return f"{DOWNLOAD_BASE_URL}/{user_id}/{file_name}"


class AssetSetting(BaseModel):
    """Per-frame settings of an asset."""

    added_by_id: UserId
    asset_id: AssetId
    created_at: AwareDatetime
    frame_id: FrameId
    hidden: bool
    id: AssetSettingId
    last_impression_at: Optional[AwareDatetime] = None
    reason: str
    selected: bool
    updated_at: Optional[AwareDatetime] = None
    updated_selected_at: AwareDatetime


class AuthResponseResultCurrentUser(BaseModel):
    """The logged-in user, with the token used to authenticate requests."""

    admin_account: Optional[Any] = None
    analytics_optout: bool
    attribution_id: Optional[Any] = None
    attribution_string: Optional[Any] = None
    auth_token: AuthToken
    auto_upload_off: bool
    avatar_file_name: FileName
    charity_subscriptions_launched: bool
    confirmed_email: Email
    created_at: AwareDatetime
    current_source_id: str
    eligible_for_app_review_prompt: bool
    email: Email
    features: list[Feature]
    google_photos_disabled: Optional[Any] = None
    has_access_to_new_google_photos: bool
    has_frame: bool
    id: UserId
    in_app_promo_opt_out: Optional[Any] = None
    latest_app_version: Optional[Any] = None
    live_photos_launched: bool
    locale: Locale
    name: UserName
    short_id: Optional[Any] = None
    show_push_prompt: bool
    smart_albums_off: bool
    smart_suggestions_off: bool
    standard_account_texter: Any
    subscriptions_launched: bool
    test_account: Optional[Any] = None
    thanks_launched: bool
    tooltip_add_photos_seen: bool
    tooltip_added_photos_seen: bool
    tooltip_gestures_seen: bool
    tooltip_inbox_seen: bool
    tooltip_manage_frames_seen: bool
    tooltip_settings_seen: bool
    unconfirmed_email: Optional[Any] = None
    updated_at: AwareDatetime
    verbose_logging_enabled: bool
    warn_smart_albums_deprecated: bool


class AuthResponseResult(BaseModel):
    current_user: AuthResponseResultCurrentUser


class AuthResponse(BaseModel):
    """Body of a successful login response."""

    error: bool
    result: AuthResponseResult


class DeliveredFrameGift(BaseModel):
    id: DeliveredFrameGiftId
    order_item_id: Any
    order_item_fulfilled_hw_serial: Any
    frame_id: FrameId
    gift_message: Any
    selected_asset_id: Any
    user_id: UserId
    created_at: AwareDatetime
    updated_at: AwareDatetime
    recipient_name: UserName
    recipient_email: Email
    is_tweed_wolf: bool
    delivered_at: AwareDatetime
    skipped_message: bool
    skipped_invites: bool
    skipped_photos: bool
    skipped_wifi: Any
    shipped_to: Any
    claim_code: Any
    claim_code_recipient_email: Any
    highlight_claim_code: bool
    claim_code_reminder_date: Any
    order: Any
    order_item: Any
    selected_asset: Any
    user: User


class FeedItem(BaseModel):
    assets: list[Asset]
    metadata: Any
    message: Any
    stick_for: Any


class FeedItemMetadata(BaseModel):
    attribution: str
    date: str
    location: Any
    pair_reasons: Any


class FrameEnvironment(BaseModel):
    id: FrameEnvironmentId
    frame_id: FrameId
    last_online_at: AwareDatetime
    created_at: AwareDatetime
    updated_at: AwareDatetime


class Impression(BaseModel):
    last_viewed_or_created_at: AwareDatetime
    view_count: int
    gesture_direction: Any
    created_at: AwareDatetime
    live_photo_on_transition: Any
    viewed_at: AwareDatetime
    id: ImpressionId
    last_viewed_at: AwareDatetime
    last_shown_with_asset_id: Any
    frame_id: FrameId
    asset_id: AssetId
    asset: Asset


class Frame(BaseModel):
    """A picture frame and its configuration."""

    id: FrameId
    name: FrameName
    user_id: UserId
    software_version: str
    build_version: str
    hw_android_version: str
    created_at: AwareDatetime
    updated_at: AwareDatetime
    handled_at: AwareDatetime
    deleted_at: Any
    updated_at_on_client: Any
    last_impression_at: AwareDatetime
    orientation: int
    auto_brightness: bool
    min_brightness: int
    max_brightness: int
    brightness: Any
    sense_motion: bool
    default_speed: Any
    slideshow_interval: int
    slideshow_auto: bool
    digits: int
    contributor_tokens: list[Any]
    hw_serial: str
    matting_color: str
    trim_color: str
    is_handling: bool
    calibrations_last_modified_at: AwareDatetime
    gestures_on: bool
    portrait_pairing_off: Any
    live_photos_on: bool
    auto_processed_playlist_ids: list[Any]
    time_zone: TimeZone
    wifi_network: str
    cold_boot_at: Any
    is_charity_water_frame: bool
    num_assets: int
    thanks_on: bool
    frame_queue_url: Optional[Url] = None
    client_queue_url: Url
    scheduled_display_sleep: bool
    scheduled_display_on_at: Any
    scheduled_display_off_at: Any
    forced_wifi_state: Any
    forced_wifi_recipient_email: Any
    is_analog_frame: bool
    control_type: str
    display_aspect_ratio: str
    has_claimable_gift: Any
    gift_billing_hint: Any
    locale: Locale
    frame_type: Any
    description: Any
    representative_asset_id: Any
    sort_mode: Optional[str] = None
    email_address: Email
    features: list[Feature]
    volume: int
    letterbox_style: Any
    pitch: Any
    wifi_frequency: int
    attachment_caption_display: bool
    user: User
    playlists: list[Any]
    delivered_frame_gift: Optional[DeliveredFrameGift] = None
    last_feed_item: FeedItem
    last_impression: Impression
    recent_assets: list[Asset]
    contributors: list[User]
    frame_environment: FrameEnvironment
    child_albums: list[Any]
    smart_adds: list[Any]


class FrameAssetsResponse(BaseModel):
    """Body of the per-frame asset listing."""

    asset_settings: list[AssetSetting]
    assets: list[Asset]
    users: list[User]


class FramesResponse(BaseModel):
    """Body of the frame listing."""

    frames: list[Frame]
    user_pending_tokens: list[Any]