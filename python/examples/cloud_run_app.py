# Run with: GOOGLE_CLOUD_PROJECT=my-project uvicorn cloud_run_app:app
from fastapi import FastAPI, Request

import cloudlog
from cloudlog.middleware import request_logger

cloudlog.init()
app = FastAPI(title="cloudlog demo")
app.add_middleware(cloudlog.TraceMiddleware)

@app.get("/orders/{order_id}")
def get_order(order_id: int, request: Request):
    log = request_logger(request)
    log.infof("looking up order %d", order_id)
    if order_id <= 0:
        log.warningj("rejected order id", {"order_id": order_id})
        return {"error": "bad order id"}
    return {"order_id": order_id}

@app.get("/legacy")
def legacy(request: Request):
    # Any object with .headers works, not just the middleware.
    cloudlog.for_request(request).notice("legacy endpoint hit")
    return {"ok": True}
