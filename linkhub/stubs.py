"""Fixed responses for extension routes that have no local behavior.

The local user is always a premium subscriber in a single organization.
"""
from fastapi import APIRouter, Request

router = APIRouter()

LOCAL_ORG_ID = "local-org"
LOCAL_ORG_NAME = "My organization"

OK = {"success": True}


# Subscriptions
@router.get("/subscriptions/status")
async def subscription_status():
    return {
        "isSubscribed": True,
        "subscriptionType": "premium",
        "status": "active",
        "billingInterval": "monthly",
        "subscriptionId": "premium-local",
        "isPastDue": False,
        "pastDueUrl": None,
        "reason": None,
        "currentOrgId": LOCAL_ORG_ID,
        "currentOrgName": LOCAL_ORG_NAME,
        "orgWithSubscription": None,
    }


@router.get("/subscriptions")
async def subscriptions():
    return {"isSubscribed": True, "isPastDue": False, "pastDueUrl": None, "subscriptions": []}


@router.get("/subscriptions/invoices")
async def invoices():
    return []


@router.get("/subscriptions/discount-used")
async def discount_used():
    return {"used": False}


@router.post("/subscriptions/{subscription_id}/cancel")
async def cancel_subscription(subscription_id: str):
    return OK


@router.post("/subscriptions/{subscription_id}/upgrade-to-annual")
@router.post("/subscriptions/{subscription_id}/upgrade-to-pro-ai")
@router.post("/subscriptions/{subscription_id}/downgrade-to-pro")
@router.get("/subscriptions/create-portal-session")
async def no_checkout_url(request: Request):
    return {"url": None}


# Organizations
@router.get("/organizations")
async def organizations():
    return [{"id": LOCAL_ORG_ID, "name": LOCAL_ORG_NAME, "role": "owner", "members": []}]


@router.post("/organizations")
async def create_organization(data: dict):
    return {"id": LOCAL_ORG_ID, "name": data.get("name") or LOCAL_ORG_NAME}


@router.post("/organizations/set-current")
@router.delete("/organizations/{org_id}")
async def organization_ok(request: Request):
    return OK


# Feeds that exist only on the hosted service
@router.get("/feeds/feed-items")
async def feed_items_page():
    return {"data": [], "pagination": {}}


@router.get("/feeds/public")
async def public_feeds():
    return {"feeds": [], "data": [], "pagination": {}}


@router.post("/feeds/import-csv")
@router.post("/feeds/{feed_id}/mark-as-read")
async def feed_ok(request: Request):
    return OK


# Accounts, analytics and misc
@router.get("/accounts/is-my-linkedin-id")
async def is_my_linkedin_id():
    return {"isMyLinkedinId": False}


@router.put("/accounts")
@router.post("/analytics/activity-logs")
@router.post("/analytics/activity-logs/batch")
@router.post("/analytics/focus-mode-sessions")
@router.post("/analytics/generation-sessions")
@router.post("/analytics/comment-sessions")
@router.post("/posts/sync-with-analytics")
@router.delete("/past-posts/{post_id}")
@router.post("/update-reads/{update_id}/mark")
@router.post("/update-reads/{update_id}/is-read")
async def accepted(request: Request):
    return OK


@router.get("/past-posts")
async def past_posts():
    return []


@router.get("/profile")
async def profile():
    return {"data": {}}


@router.post("/profile/onboarding-lists")
async def onboarding_lists():
    return {"data": {"lists": []}}


@router.post("/profile/generate-profiles-from-list-name")
async def profiles_from_list_name():
    return {"data": {"items": []}}


@router.get("/notifications")
async def notifications():
    return {"feeds": []}


@router.get("/updates/latest")
async def latest_updates():
    return {"updates": []}


@router.get("/posts/sync-session/active")
@router.get("/posts/sync-session/last-completed")
async def no_sync_session():
    return None


@router.post("/posts/sync-session/start")
async def start_sync_session():
    return {"id": "local-sync"}


@router.post("/posts/reaction-prediction")
async def reaction_prediction():
    return {
        "reactionPrediction": {
            "like": 70, "celebrate": 10, "support": 10, "love": 5, "insightful": 5, "total": 100,
        }
    }


@router.get("/posts/from-linkpost")
async def posts_from_linkpost():
    return {"posts": []}


@router.get("/promotion-banners")
async def promotion_banners():
    return {"banners": []}


@router.get("/carousel")
@router.get("/leaderboard/generate-pdf")
@router.get("/linkedin/fetch-post-comments-fetchin")
async def empty_data():
    return {"data": []}


@router.get("/rewrite-options")
@router.get("/rewrite-options/get-multiple")
async def rewrite_options():
    return {"options": []}


@router.get("/lumail/user-count")
async def user_count():
    return {"userCount": 100}
