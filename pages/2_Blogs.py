# pages/2_Blogs.py
import streamlit as st

from client.api import ApiError
from config import ConfigurationError
from site_ui import get_site, setup_page

setup_page("Blogs")
site = get_site()


def show_detail(blog_id):
    try:
        blog, related = site.blog_detail(blog_id)
    except (ApiError, ConfigurationError) as e:
        st.error(f"Error: {e}")
        return
    if st.button("← All posts"):
        st.session_state.blog_id = None
        st.rerun()
    st.title(blog.get("title") or "")
    meta = []
    if blog.get("publication_date"):
        meta.append(f"Posted on {blog['publication_date'][:10]}")
    meta.append(f"{blog.get('reading_time') or '3 min'} reading time")
    st.caption(" | ".join(meta))
    if blog.get("image_url"):
        st.image(blog["image_url"])
    if blog.get("video_url"):
        st.video(blog["video_url"])
    st.markdown(blog.get("content") or "", unsafe_allow_html=True)
    if blog.get("tags"):
        st.write(" ".join(f"`{t}`" for t in blog["tags"]))

    if related:
        st.header("Related posts")
        for col, b in zip(st.columns(len(related)), related):
            with col:
                if b.get("image_url"):
                    st.image(b["image_url"])
                st.subheader(b.get("title") or "")
                if st.button("Read more →", key=f"related_blog_{b['id']}"):
                    st.session_state.blog_id = b["id"]
                    st.rerun()


if st.session_state.get("blog_id"):
    show_detail(st.session_state.blog_id)
else:
    st.title("Blogs")
    try:
        blogs = site.list_blogs()
    except (ApiError, ConfigurationError) as e:
        st.error(f"Error: {e}")
        blogs = []
    if not blogs:
        st.info("No blog posts yet.")
    cols = st.columns(3)
    for i, b in enumerate(blogs):
        with cols[i % 3]:
            if b.get("image_url"):
                st.image(b["image_url"])
            st.subheader(b.get("title") or "")
            st.write(b.get("description") or "")
            if st.button("Read more →", key=f"blog_{b['id']}"):
                st.session_state.blog_id = b["id"]
                st.rerun()
