import cloudlog

def main():
    cloudlog.init()
    cloudlog.debug("the lowest level")
    cloudlog.log("phase 2 processing ended")  # or cloudlog.info()
    cloudlog.notice("shutting down normally...")
    cloudlog.warningf("difficulties, retrying shutdown (attempt %d)...", 2)

    # Use these sparingly to draw the attention of a human, sooner or later.
    cloudlog.error("a minor problem that a real human should act on")
    cloudlog.criticalj("a major problem", {"component": "billing", "queue_depth": 1200})
    cloudlog.alert("on-call needs to look at this now")
    cloudlog.emergency("core functionality is down")
    cloudlog.shutdown()

if __name__ == "__main__":
    main()
