"""
Tests for the stub backend's account endpoints
"""

import pytest

REGISTER_DATA = {
    "name": "Test User",
    "email": "test@example.com",
    "password": "password123",
    "userType": "patient"
}

class TestRoot:
    """Test cases for the informational endpoints"""

    def test_root_reports_running(self, client):
        """Test the root endpoint answers"""
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["message"] == "Test server is running!"

    def test_health(self, client):
        """Test the health check"""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

class TestRegistration:
    """Test cases for user registration"""

    def test_register_success(self, client):
        """Test successful registration returns a token and camelCase user"""
        response = client.post("/api/users/register", json=REGISTER_DATA)
        assert response.status_code == 201

        data = response.json()
        assert data["success"] is True
        assert data["token"]
        assert data["user"]["email"] == "test@example.com"
        assert data["user"]["firstName"] == "Test"
        assert data["user"]["lastName"] == "User"
        assert data["user"]["role"] == "patient"
        assert "hashed_password" not in data["user"]

    def test_register_duplicate_email(self, client):
        """Test registration with an email already in use"""
        assert client.post("/api/users/register", json=REGISTER_DATA).status_code == 201

        response = client.post("/api/users/register", json=REGISTER_DATA)
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "An account with this email already exists"
        }

    def test_register_short_password(self, client):
        """Test registration rejects passwords under 8 characters"""
        response = client.post("/api/users/register", json={**REGISTER_DATA, "password": "short"})
        assert response.status_code == 422
        assert response.json() == {
            "success": False,
            "message": "Password must be at least 8 characters long"
        }

    def test_register_invalid_email(self, client):
        """Test validation failures are rendered with a message"""
        response = client.post("/api/users/register", json={**REGISTER_DATA, "email": "not-an-email"})
        assert response.status_code == 422

        data = response.json()
        assert data["success"] is False
        assert "email" in data["message"]
        assert "detail" not in data

    def test_register_invalid_user_type(self, client):
        """Test registration rejects unknown roles"""
        response = client.post("/api/users/register", json={**REGISTER_DATA, "userType": "nurse"})
        assert response.status_code == 422

    def test_register_single_word_name(self, client):
        """Test a one-word name leaves the last name empty"""
        response = client.post("/api/users/register", json={**REGISTER_DATA, "name": "Cher"})
        assert response.status_code == 201
        assert response.json()["user"]["firstName"] == "Cher"
        assert response.json()["user"]["lastName"] == ""

class TestLogin:
    """Test cases for user login"""

    def setup_method(self):
        self.credentials = {"email": REGISTER_DATA["email"], "password": REGISTER_DATA["password"]}

    @pytest.mark.parametrize("prefix", ["/api/users", "/api/auth"])
    def test_login_success(self, client, prefix):
        """Test login works under both mount points"""
        client.post(f"{prefix}/register", json=REGISTER_DATA)

        response = client.post(f"{prefix}/login", json=self.credentials)
        assert response.status_code == 200

        data = response.json()
        assert data["success"] is True
        assert data["token"]
        assert data["user"]["email"] == "test@example.com"

    def test_login_email_is_case_insensitive(self, client):
        """Test login normalizes the email"""
        client.post("/api/users/register", json=REGISTER_DATA)

        response = client.post("/api/users/login", json={**self.credentials, "email": "TEST@Example.com"})
        assert response.status_code == 200

    def test_login_wrong_password(self, client):
        """Test login with wrong password"""
        client.post("/api/users/register", json=REGISTER_DATA)

        response = client.post("/api/users/login", json={**self.credentials, "password": "wrong-password"})
        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Invalid email or password"}

    def test_login_nonexistent_user(self, client):
        """Test login with an unknown email"""
        response = client.post("/api/users/login", json=self.credentials)
        assert response.status_code == 401
        assert response.json()["success"] is False

class TestProfile:
    """Test cases for the authenticated profile endpoint"""

    def test_profile_with_token(self, client):
        """Test the profile is returned for a valid token"""
        token = client.post("/api/users/register", json=REGISTER_DATA).json()["token"]

        response = client.get("/api/users/profile", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200
        assert response.json()["user"]["email"] == "test@example.com"

    def test_profile_without_token(self, client):
        """Test access without token"""
        response = client.get("/api/users/profile")
        assert response.status_code == 401
        assert response.json()["message"] == "Please authenticate"

    def test_profile_invalid_token(self, client):
        """Test access with invalid token"""
        response = client.get("/api/users/profile", headers={"Authorization": "Bearer invalid_token"})
        assert response.status_code == 401
