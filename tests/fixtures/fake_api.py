"""In-process API used to exercise the client over ASGI."""

from typing import Optional

from fastapi import FastAPI, Header, HTTPException, Request

from apikit import ApiModel, Base64Data, PhoneNumber

TOKEN = "test-token"

MERCHANTS = [
    {"id": f"m-{i}", "name": f"Merchant {i}", "phone": f"(510) 864-12{i:02d}"}
    for i in range(1, 6)
]

OWNERS = [{"id": str(i), "email": f"owner{i}@example.com"} for i in range(1, 8)]


class Merchant(ApiModel):
    id: str
    name: str
    phone: PhoneNumber = PhoneNumber()


class Owner(ApiModel):
    id: str
    email: str


class Receipt(ApiModel):
    id: Optional[str] = None
    content: Base64Data


app = FastAPI(title="Fake API")


def check_token(authorization: Optional[str]) -> None:
    if authorization != f"Bearer {TOKEN}":
        raise HTTPException(status_code=401, detail="Unauthorized")


@app.get("/developer/v1/merchants")
async def list_merchants(
    request: Request,
    page_size: int = 2,
    start: Optional[str] = None,
    authorization: Optional[str] = Header(None),
):
    check_token(authorization)
    offset = 0
    if start is not None:
        offset = [m["id"] for m in MERCHANTS].index(start) + 1
    data = MERCHANTS[offset : offset + page_size]
    next_link = None
    if offset + page_size < len(MERCHANTS):
        next_link = str(request.url.include_query_params(start=data[-1]["id"]))
    return {"page": {"next": next_link}, "data": data}


@app.get("/crm/v3/owners")
async def list_owners(
    limit: int = 3,
    after: Optional[str] = None,
    authorization: Optional[str] = Header(None),
):
    check_token(authorization)
    offset = int(after) if after else 0
    results = OWNERS[offset : offset + limit]
    body = {"results": results}
    if offset + limit < len(OWNERS):
        next_after = str(offset + limit)
        body["paging"] = {"next": {"after": next_after, "link": f"?after={next_after}"}}
    return body


@app.get("/developer/v1/broken")
async def broken(authorization: Optional[str] = Header(None)):
    check_token(authorization)
    return {"page": {"next": None}, "data": "not-a-list"}


@app.get("/developer/v1/stuck")
async def stuck(authorization: Optional[str] = Header(None)):
    check_token(authorization)
    return {"results": OWNERS[:1], "paging": {"next": {"after": "1"}}}


@app.post("/developer/v1/receipts")
async def create_receipt(receipt: Receipt, authorization: Optional[str] = Header(None)):
    check_token(authorization)
    return {"id": "r-1", "content": receipt.content.encode()}


@app.delete("/developer/v1/receipts/{receipt_id}", status_code=204)
async def delete_receipt(receipt_id: str, authorization: Optional[str] = Header(None)):
    check_token(authorization)
    if receipt_id != "r-1":
        raise HTTPException(status_code=404, detail="Receipt not found")
